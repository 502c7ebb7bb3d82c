# -*- coding: utf-8 -*-

#######################################################################
# Copyright (C) 2020 Vinh Tran
#
#  This script is used to list all scaffolds and their clustering
#  methods available in the data folder of gfi
#
#  This script is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU General Public License <http://www.gnu.org/licenses/> for
#  more details
#
#  Contact: tran@bio.uni-frankfurt.de
#
#######################################################################

import sys
import os
import argparse
import re
from Bio import SeqIO
from gfi.pathConfig import getBasePath
from gfi.integrateGF import SCAFFOLD_PATTERN

def countSeqs(methodDir, faaFiles):
    nSeq = 0
    for faa in faaFiles:
        with open(methodDir + '/' + faa) as f:
            nSeq = nSeq + sum(1 for _ in SeqIO.parse(f, 'fasta'))
    return(nSeq)

def getMethods(scaffoldDir, count):
    """ Return a list of (method, number of orthogroups, number of sequences) """
    methods = []
    fastaDir = scaffoldDir + '/fasta'
    if not os.path.isdir(fastaDir):
        return(methods)
    for method in sorted(os.listdir(fastaDir)):
        methodDir = fastaDir + '/' + method
        if not os.path.isdir(methodDir):
            continue
        faaFiles = [f for f in os.listdir(methodDir) if re.fullmatch(r'\d+\.faa', f)]
        nSeq = countSeqs(methodDir, faaFiles) if count else None
        methods.append((method, len(faaFiles), nSeq))
    return(methods)

def getScaffolds(dataPath, count = False):
    scaffolds = {}
    for scaffold in sorted(os.listdir(dataPath)):
        if re.fullmatch(SCAFFOLD_PATTERN, scaffold) and os.path.isdir(dataPath + '/' + scaffold):
            scaffolds[scaffold] = getMethods(dataPath + '/' + scaffold, count)
    return(scaffolds)

def main():
    version = '1.0.0'
    parser = argparse.ArgumentParser(description='You are running showScaffolds version ' + str(version) + '.')
    parser.add_argument('-p', '--basePath', help='Installation base directory. Default: taken from GFI_PATH or pathconfig.txt',
                        action='store', default='')
    parser.add_argument('--count', help='Also count the sequences in the peptide files of each method', action='store_true', default=False)
    args = parser.parse_args()

    basePath = args.basePath
    if not basePath:
        basePath = getBasePath()
    dataPath = os.path.join(basePath, 'data')
    if not os.path.isdir(dataPath):
        sys.exit('*** ERROR: %s not found' % dataPath)

    print('##### Scaffolds found at %s #####\n' % dataPath)
    scaffolds = getScaffolds(dataPath, args.count)
    if len(scaffolds) == 0:
        print('No scaffold found!')
    for scaffold in scaffolds:
        print(scaffold)
        for (method, nOg, nSeq) in scaffolds[scaffold]:
            if nSeq is None:
                print('\t%s\t%s orthogroups' % (method, nOg))
            else:
                print('\t%s\t%s orthogroups\t%s sequences' % (method, nOg, nSeq))

if __name__ == '__main__':
    main()
