"""
Shared fixtures for gfi tests: a scaffold directory and an orthogroup directory on disk
"""

import sys
import pytest

from gfi.tests.helpers import writeFiles


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run inside an empty working directory so the output folder lands in tmp_path"""
    run = tmp_path / 'run'
    run.mkdir()
    monkeypatch.chdir(run)
    return run


@pytest.fixture
def scaffold(tmp_path):
    """Scaffold 22Gv1.1 with an orthomcl method folder"""
    scaffoldDir = tmp_path / 'base' / 'data' / '22Gv1.1'
    writeFiles(scaffoldDir / 'fasta' / 'orthomcl', {
        '1.faa': '>s1\nAAA\n',
        '1.fna': '>s1\nATGATG\n',
        '2.faa': '>s3\nCCC\n',
        '2.fna': '>s3\nGGGTTT\n',
        '3.faa': '>s5\nDDD\n',
    })
    return scaffoldDir


@pytest.fixture
def run_main(monkeypatch):
    def _run(main, *argv):
        monkeypatch.setattr(sys, 'argv', ['prog'] + list(argv))
        return main()
    return _run
