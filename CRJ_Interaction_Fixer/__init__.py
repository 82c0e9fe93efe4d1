'''
CRJ Interaction Fixer
-----------------

This tool builds a small add-on package for Microsoft Flight Simulator
which fixes cockpit knob interactions in the Aerosoft CRJ. Knobs that
use a separate momentary push button are switched to an infinite push
template, so the knob can be turned and pushed with the same control.

  * The vendor package is never edited in place.
  * The patch package holds a copy of the vendor templates file with
    the infinite push template appended, plus patched copies of every
    CRJ 550 and CRJ 700 interior model behavior file.
  * A manifest.json and layout.json are generated for the patch
    package, depending on the vendor package version.
  * The packages folder is found through the simulator UserCfg.opt,
    or may be given on the command line or in settings.json.
  * The embedded modification catalog ids are not yet verified
    against the vendor files; see File_Manager/Modifications.py.

This tool is available as runnable Python source code (with the lxml
package).

Running:

  * "crj-interaction-fixer [args]", or
    "python -m CRJ_Interaction_Fixer [args]"
    - Run with -h for full options.
    - Any prior patch package is removed and rebuilt on each run.

Settings:

  * A "settings.json" file in the working directory may override
    defaults, eg. the packages folder path; see the Settings_class
    documentation for available fields.
'''

from . import Common
from .Common import home_path, data_path
from .Common import Print, Settings, Get_Version, Change_Log
# Allow convenient catching of all special exception types.
from .Common.Exceptions import *

from . import File_Manager
from .File_Manager import *

from . import Transforms
from .Transforms import *
