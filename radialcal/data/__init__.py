"""
Default data files for radialcal
"""
import os

# Path to package data directory
DATA_DIR = os.path.dirname(os.path.abspath(__file__))

# Sample events for the 12hour, 7day and 4week views
DEFAULT_SAMPLE_EVENTS = os.path.join(DATA_DIR, 'sample_events.tsv')
