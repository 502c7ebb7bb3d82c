# -*- coding: utf-8 -*-

#######################################################################
# Copyright (C) 2020 Vinh Tran
#
#  This script is used to find the installation base directory of gfi,
#  which holds the pre-computed scaffold data in its data folder
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

ENVVAR = 'GFI_PATH'

def getPathconfigFile():
    gfiPath = os.path.dirname(os.path.realpath(__file__))
    return(gfiPath + '/pathconfig.txt')

def getBasePath():
    """ Return the installation base directory.
    Taken from the GFI_PATH environment variable if it is set,
    otherwise from pathconfig.txt written by setupGF
    """
    basePath = os.environ.get(ENVVAR, '').strip()
    if basePath:
        return(basePath)
    pathconfigFile = getPathconfigFile()
    if not os.path.exists(pathconfigFile):
        sys.exit('*** ERROR: No pathconfig.txt found. Please run setupGF or set the %s environment variable.' % ENVVAR)
    with open(pathconfigFile) as f:
        basePath = f.readline().strip()
    if not basePath:
        sys.exit('*** ERROR: %s is empty. Please run setupGF again.' % pathconfigFile)
    return(basePath)
