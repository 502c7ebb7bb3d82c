# -*- coding: utf-8 -*-

#######################################################################
# Copyright (C) 2020 Vinh Tran
#
#  This script is used to setup gfi: create the data folder for the
#  pre-computed scaffolds and save its location into pathconfig.txt
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
from pathlib import Path
from gfi.pathConfig import getPathconfigFile

def writePathconfig(outPath, pathconfigFile):
    try:
        with open(pathconfigFile, 'w') as f:
            f.write(outPath + '\n')
    except OSError as e:
        sys.exit('*** ERROR: Cannot write %s: %s' % (pathconfigFile, e.strerror))

def main():
    version = '1.0.0'
    parser = argparse.ArgumentParser(description='You are running setupGF version ' + str(version) + '.')
    parser.add_argument('-o', '--outPath', help='Installation base directory. Scaffolds are expected in its data folder',
                        action='store', default='', required=True)

    ### get arguments
    args = parser.parse_args()
    outPath = os.path.abspath(args.outPath)
    Path(outPath + '/data').mkdir(parents = True, exist_ok = True)
    pathconfigFile = getPathconfigFile()
    writePathconfig(outPath, pathconfigFile)
    print('Scaffolds (e.g. 22Gv1.1/fasta/<method>/<id>.faa) should be placed in %s' % (outPath + '/data'))

if __name__ == '__main__':
    main()
