'''
Batch processing of interior model behavior files across the model
folders of an aircraft.
'''
import fnmatch

from ..Common import Settings, Print, Package_IO_Exception
from ..Common import Node_Not_Found_Exception, Ambiguous_Node_Exception
from ..File_Manager import Read_Model_Behavior_File, Load_Modifications
from ..File_Manager.Package_Files import Create_Directory
from .Knob_Push import Patch_Knob_Push


def Get_Model_Folders(airplane_path):
    '''
    Returns a sorted list of the "model*" subfolders of an airplane
    folder. Raises Package_IO_Exception if the airplane folder
    is missing.
    '''
    try:
        return sorted(
            x for x in airplane_path.iterdir()
            if x.is_dir() and fnmatch.fnmatch(x.name.lower(), 'model*'))
    except OSError as ex:
        raise Package_IO_Exception(
            'failed to list airplane folder "{}": {}'.format(airplane_path, ex)) from ex


def Process_Model_Behavior_File(
        source_path,
        dest_path,
        modifications,
        template_name,
    ):
    '''
    Read, patch, and write a single model behavior file.
    Nothing is written if reading or patching fails.
    '''
    model_file = Read_Model_Behavior_File(source_path)
    try:
        Patch_Knob_Push(model_file.body_root, modifications, template_name)
    except (Node_Not_Found_Exception, Ambiguous_Node_Exception) as ex:
        # Tack the file onto the message, keeping the exception type.
        raise type(ex)('{} (in "{}")'.format(ex, source_path)) from ex

    Create_Directory(dest_path.parent)
    model_file.Write_File(dest_path)
    return


def Process_Model_Behaviors(
        original_package_path,
        patch_package_path,
        airplane_id,
        model_behavior_file_name,
        modifications = None,
        settings = None,
    ):
    '''
    Patch the named model behavior file in every model folder of an
    airplane, writing results to matching folders in the patch package.
    Returns a list of output file Paths.

    * original_package_path
      - Path to the vendor package.
    * patch_package_path
      - Path to the patch package being built.
    * airplane_id
      - String, folder name under SimObjects/Airplanes.
    * model_behavior_file_name
      - String, eg. 'CRJ550_Interior.xml'.
    * modifications
      - Optional list of Modification_Records; defaults to the
        embedded catalog.
    * settings
      - Optional Settings_class object; defaults to the global Settings.
    '''
    if settings == None:
        settings = Settings
    if modifications == None:
        modifications = Load_Modifications()

    airplane_subpath = ('SimObjects', 'Airplanes', airplane_id)
    original_airplane_path = original_package_path.joinpath(*airplane_subpath)
    patch_airplane_path = patch_package_path.joinpath(*airplane_subpath)

    output_paths = []
    for model_folder in Get_Model_Folders(original_airplane_path):
        Print("Processing model '{}'".format(model_folder.name))

        dest_path = patch_airplane_path / model_folder.name / model_behavior_file_name
        Process_Model_Behavior_File(
            source_path = model_folder / model_behavior_file_name,
            dest_path = dest_path,
            modifications = modifications,
            template_name = settings.infinite_push_template_name,
            )
        output_paths.append(dest_path)
    return output_paths
