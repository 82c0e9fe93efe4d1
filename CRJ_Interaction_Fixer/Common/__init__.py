'''
Holds modules that will be commonly imported by the file manager,
transforms, and the command line entry.
'''
# Import exceptions early, due to some dependency issues.
from .Exceptions import *

from . import Change_Log
from .Change_Log import Get_Version
from .Print import Print
from .Home_Path import home_path, data_path
from .Settings import Settings, Settings_class

from . import XML_Misc
