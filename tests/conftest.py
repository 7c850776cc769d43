"""
Shared fixtures for the Clausewitz parser tests.

Provides sample script buffers and paths to the sample files.
"""
import sys
import os
import pytest

# Ensure the project root is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

SAMPLES_DIR = os.path.join(os.path.dirname(__file__), '..', 'examples', 'game_samples')


# ── Sample Clausewitz buffers ───────────────────────────────────────────

SAMPLE_COA = b"""\
coa_export={
\tpattern="pattern_solid.dds"
\tcolor1=red
\tcolor2=yellow
\tcolored_emblem={
\t\tcolor1=yellow
\t\ttexture="ce_fleur.dds"
\t\tinstance={
\t\t\tposition={ 0.500000 0.500000 }
\t\t\tscale={ 0.700000 0.700000 }
\t\t\tdepth=1.010000
\t\t\trotation=45
\t\t}
\t}
}
"""

SAMPLE_SAVE = b"""\
date=1444.11.11
player="FRA"
savegame_version={
\tfirst=1
\tsecond=29
\tname="Manchu"
}
dlc_enabled={
\t"Conquest of Paradise"
\t"Wealth of Nations"
}
multiplayer=no
"""


@pytest.fixture
def coa_buffer():
    """Coat of arms block with nested dicts and float lists"""
    return SAMPLE_COA


@pytest.fixture
def save_buffer():
    """Save game header fields"""
    return SAMPLE_SAVE


@pytest.fixture
def history_path():
    """Province history sample file"""
    return os.path.join(SAMPLES_DIR, 'history_sample.txt')


@pytest.fixture
def save_path():
    """Save game sample with EU4txt header and a Windows-1252 byte"""
    return os.path.join(SAMPLES_DIR, 'save_sample.eu4')
