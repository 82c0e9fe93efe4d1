'''
Holds modules with the file handling: model behavior read/write,
the modification catalog, and package file plumbing.
'''
from .Model_Behavior_File import *
from .Modifications import Modification_Record
from .Modifications import Load_Modifications, Parse_Modifications
from . import Package_Files
from . import Package_Metadata
from .Package_Metadata import Make_Layout, Make_Manifest
