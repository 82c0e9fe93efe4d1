'''
This small module sets up the paths to the package directory and its
embedded data folder, consistently for both original source and a
frozen executable.  Split off from other modules for easier imports.
'''
import sys
from pathlib import Path

# pyinstaller adds a 'frozen' attribute to sys, in which case _MEIPASS
#  holds the unpacked app folder with the package copied under it.
if getattr(sys, 'frozen', False):
    home_path = Path(sys._MEIPASS) / 'CRJ_Interaction_Fixer'
else:
    home_path = Path(__file__).resolve().parents[1]

# Embedded resources: modification catalog, template fragment, etc.
data_path = home_path / 'Data'
