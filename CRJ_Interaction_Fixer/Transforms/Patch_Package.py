'''
Builds the patch package: a separate community package holding the
patched templates file and interior model behaviors, along with its
own manifest and layout, which loads on top of the vendor package.
'''
from ..Common import Settings, Print, data_path
from ..Common import Package_Missing_Exception, Package_Version_Exception
from ..File_Manager import Load_Modifications, Make_Layout, Make_Manifest
from ..File_Manager.Package_Files import (
    Get_Package_Path, Read_Manifest, Create_Directory,
    Remove_Directory, Copy_File, Append_Text, Read_Data_Text,
    )
from .Model_Behaviors import Process_Model_Behaviors

template_fragment_path = data_path / 'ASCRJ_Knob_Infinite_Push_Template.xml'


def Check_Original_Package(original_package_path, settings = None):
    '''
    Verify the vendor package exists and is the required version.
    Returns its manifest dict.
    '''
    if settings == None:
        settings = Settings

    if not original_package_path.is_dir():
        raise Package_Missing_Exception(
            'the directory "{}" does not exist; please ensure the {} package'
            ' is installed'.format(original_package_path, settings.original_package_name))

    Print('Checking package dependencies')
    manifest = Read_Manifest(original_package_path)
    version = manifest.get('package_version')
    if version != settings.original_package_version_requirement:
        message = ('{} must be version {}; version {} is currently installed'
                   ).format(settings.original_package_name,
                            settings.original_package_version_requirement,
                            version)
        if not settings.allow_version_mismatch:
            raise Package_Version_Exception(message)
        Print('Warning: {}; continuing anyway'.format(message))
    return manifest


def Patch_Templates(original_package_path, patch_package_path, settings = None):
    '''
    Copy the vendor templates file into the patch package, and append
    the infinite push template fragment to it.
    Returns the path of the patched templates file.
    '''
    if settings == None:
        settings = Settings

    Print('Processing Model Behavior Defs')
    defs_path = patch_package_path / 'ModelBehaviorDefs'
    Create_Directory(defs_path)

    templates_path = defs_path / settings.templates_file_name
    Copy_File(
        original_package_path / 'ModelBehaviorDefs' / settings.templates_file_name,
        templates_path)

    Print('Applying patch to {}'.format(templates_path))
    Append_Text(templates_path, Read_Data_Text(template_fragment_path))
    return templates_path


def Build_Patch_Package(settings = None, modifications = None):
    '''
    Build the full patch package, replacing any prior build.
    Returns the Path to the patch package.

    * settings
      - Optional Settings_class object; defaults to the global Settings.
    * modifications
      - Optional list of Modification_Records; defaults to the
        embedded catalog.
    '''
    if settings == None:
        settings = Settings
    settings.Delayed_Init()
    if modifications == None:
        modifications = Load_Modifications()

    Print('Searching for MSFS packages path')
    original_package_path = Get_Package_Path(
        settings.original_package_name, settings.package_source, settings)
    original_manifest = Check_Original_Package(original_package_path, settings)

    # The patch always goes to the community folder.
    patch_package_path = Get_Package_Path(
        settings.patch_package_name, 'Community', settings)

    # Clear out any previous patch package.
    Remove_Directory(patch_package_path)
    Create_Directory(patch_package_path)

    Patch_Templates(original_package_path, patch_package_path, settings)

    for airplane_id, file_name in settings.aircraft_variants:
        Print("Processing '{}' files".format(file_name))
        Process_Model_Behaviors(
            original_package_path,
            patch_package_path,
            airplane_id,
            file_name,
            modifications = modifications,
            settings = settings,
            )

    # Layout goes first, since it lists the files present.
    Make_Layout(patch_package_path)
    Make_Manifest(patch_package_path, original_manifest, settings)
    return patch_package_path
