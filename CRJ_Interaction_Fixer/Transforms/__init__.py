'''
Transforms applied to the vendor package content, and the package
builder that runs them.
'''
from .Knob_Push import Patch_Knob_Push
from .Model_Behaviors import Process_Model_Behaviors
from .Patch_Package import Build_Patch_Package
