# -*- coding: utf-8 -*-

#######################################################################
# Copyright (C) 2020 Vinh Tran
#
#  This script is used to integrate orthogroup fasta files of a gene
#  family classification into a pre-computed scaffold. For each
#  orthogroup, the scaffold sequences and the new sequences are
#  concatenated into one file within integratedGeneFamilies_dir.
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
import shutil
from datetime import datetime
from pathlib import Path
from tqdm import tqdm
from gfi.pathConfig import getBasePath

OUTDIR = 'integratedGeneFamilies_dir'
SCAFFOLD_PATTERN = r'\d+Gv\d+\.\d+'
METHOD_PATTERN = r'\w+'
ORTHOGROUP_PATTERNS = (r'(\d+)\.faa', r'(\d+)\.fna', r'(\d+)\.fasta')


class IntegrateParser(argparse.ArgumentParser):
    def error(self, message):
        self.print_help(sys.stderr)
        sys.exit('*** ERROR: %s' % message)


def printMsg(msg):
    print('[%s] %s' % (datetime.now().strftime('%Y-%m-%d %H:%M:%S'), msg))

def getScaffoldName(scaffold):
    if os.path.isabs(scaffold):
        return(os.path.basename(os.path.normpath(scaffold)))
    return(scaffold)

def getScaffoldDir(scaffold):
    """ Return the scaffold directory for a scaffold given by name or by absolute path.
    Names are looked up in the data folder of the installation base directory.
    """
    if os.path.isabs(scaffold):
        return(scaffold)
    return(os.path.join(getBasePath(), 'data', scaffold))

def checkScaffoldName(scaffoldName, parser = None):
    if not re.fullmatch(SCAFFOLD_PATTERN, scaffoldName):
        if parser:
            parser.print_help(sys.stderr)
        sys.exit('*** ERROR: Invalid scaffold name "%s". It must look like <digits>Gv<digits>.<digits> (^%s$), e.g. 22Gv1.1' % (scaffoldName, SCAFFOLD_PATTERN))

def checkMethodName(method, parser = None):
    if not re.fullmatch(METHOD_PATTERN, method):
        if parser:
            parser.print_help(sys.stderr)
        sys.exit('*** ERROR: Invalid method name "%s". It must contain only word characters (^%s$)' % (method, METHOD_PATTERN))

def listDir(directory):
    try:
        return(os.listdir(directory))
    except OSError as e:
        sys.exit('*** ERROR: Cannot read directory %s: %s' % (directory, e.strerror))

def checkOrthogroupDir(orthogroupDir):
    for fileName in listDir(orthogroupDir):
        if fileName.startswith('.'):
            continue
        if not any(re.fullmatch(p, fileName) for p in ORTHOGROUP_PATTERNS):
            sys.exit('*** ERROR: Unexpected file "%s" found in %s!\n'
                     'Orthogroup files must be named <orthogroup_id>.faa, .fna or .fasta. '
                     'Please regenerate this directory with the gene family classification tool.' % (fileName, orthogroupDir))

def checkScaffoldMethod(scaffoldDir, method):
    methodDir = scaffoldDir + '/fasta/' + method
    if not os.path.isdir(methodDir):
        sys.exit('*** ERROR: %s not found. Please check --scaffold and --method' % methodDir)

def createOutDir(outDir):
    try:
        Path(outDir).mkdir(parents = False, exist_ok = False)
    except FileExistsError:
        sys.exit('*** ERROR: %s already exists! Please remove or rename it before running integrateGF again.' % outDir)
    except OSError as e:
        sys.exit('*** ERROR: Cannot create %s: %s' % (outDir, e.strerror))

def getOrthogroupIds(orthogroupDir):
    """ Scan the orthogroup directory and return the peptide and CDS ids.
    Ids are kept as they appear in the file names. .fasta files are not indexed.
    """
    faaIds = set()
    fnaIds = set()
    for fileName in listDir(orthogroupDir):
        faa = re.fullmatch(r'(\d+)\.faa', fileName)
        if faa:
            faaIds.add(faa.group(1))
            continue
        fna = re.fullmatch(r'(\d+)\.fna', fileName)
        if fna:
            fnaIds.add(fna.group(1))
    return(faaIds, fnaIds)

def checkIdSets(faaIds, fnaIds):
    # only the set sizes are compared, ids without a CDS pair are skipped during merging
    if len(fnaIds) > 0 and not len(fnaIds) == len(faaIds):
        sys.exit('*** ERROR: protein and CDS fasta files not equivalent (%s .faa vs. %s .fna files)' % (len(faaIds), len(fnaIds)))

def concatFiles(first, second, out):
    """ Write the content of first followed by second into out.
    Both sources are opened before out is created.
    """
    with open(first, 'rb') as f1, open(second, 'rb') as f2:
        with open(out, 'wb') as o:
            shutil.copyfileobj(f1, o)
            shutil.copyfileobj(f2, o)

def mergeOrthogroup(ogId, ext, methodDir, orthogroupDir, outDir):
    fileName = '%s.%s' % (ogId, ext)
    try:
        concatFiles(methodDir + '/' + fileName, orthogroupDir + '/' + fileName, outDir + '/' + fileName)
    except OSError as e:
        sys.exit('*** ERROR: Problem while merging %s of orthogroup %s: %s' % (fileName, ogId, e))

def integrate(orthogroupDir, scaffoldDir, method, outDir = OUTDIR):
    methodDir = scaffoldDir + '/fasta/' + method
    faaIds, fnaIds = getOrthogroupIds(orthogroupDir)
    checkIdSets(faaIds, fnaIds)
    printMsg('Merging %s orthogroups into %s...' % (len(faaIds), outDir))
    for ogId in tqdm(sorted(faaIds, key = int)):
        mergeOrthogroup(ogId, 'faa', methodDir, orthogroupDir, outDir)
        if len(fnaIds) > 0 and ogId in fnaIds:
            mergeOrthogroup(ogId, 'fna', methodDir, orthogroupDir, outDir)
    return(len(faaIds))

def main():
    version = '1.0.0'
    parser = IntegrateParser(description='You are running integrateGF version ' + str(version) + '.')
    required = parser.add_argument_group('required arguments')
    required.add_argument('--orthogroup_fasta', help='Directory of orthogroup fasta files (<id>.faa, <id>.fna) from the gene family classification',
                            action='store', default='', required=True)
    required.add_argument('--scaffold', help='Scaffold name (e.g. 22Gv1.1) or absolute path to a scaffold directory',
                            action='store', default='', required=True)
    required.add_argument('--method', help='Clustering method of the scaffold (e.g. orthomcl)',
                            action='store', default='', required=True)

    ### get arguments
    args = parser.parse_args()
    orthogroupDir = args.orthogroup_fasta
    scaffold = args.scaffold
    method = args.method
    if not (orthogroupDir and scaffold and method):
        parser.print_help(sys.stderr)
        sys.exit('*** ERROR: --orthogroup_fasta, --scaffold and --method are required!')

    printMsg('Integrating gene families of %s into scaffold %s (%s)' % (orthogroupDir, scaffold, method))

    ### check inputs
    checkScaffoldName(getScaffoldName(scaffold), parser)
    checkMethodName(method, parser)
    checkOrthogroupDir(orthogroupDir)
    scaffoldDir = getScaffoldDir(scaffold)
    checkScaffoldMethod(scaffoldDir, method)

    ### merge orthogroups
    createOutDir(OUTDIR)
    nOg = integrate(orthogroupDir, scaffoldDir, method, OUTDIR)
    printMsg('Done! %s orthogroups can be found in %s' % (nOg, os.path.abspath(OUTDIR)))

if __name__ == '__main__':
    main()
