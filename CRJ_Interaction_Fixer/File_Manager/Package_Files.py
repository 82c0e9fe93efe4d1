'''
File system support for simulator packages: locating the packages
folder, resolving package paths, and the small set of directory and
file operations used when building the patch package.

All operations print what they touch, and convert OSErrors into
Package_IO_Exception with the path included.
'''
import os
import json
import shutil
from pathlib import Path

from ..Common import Settings, Print
from ..Common import Package_IO_Exception
from ..Common import Packages_Path_Exception
from ..Common import Package_Missing_Exception


def Get_User_Config_Paths():
    '''
    Returns a list of candidate UserCfg.opt paths, MS Store install
    first, then Steam.
    '''
    # Fall back on the user profile when the app data variables are
    #  not set, eg. when running outside of windows.
    home = Path(os.environ.get('USERPROFILE', Path.home()))
    local_app_data = Path(os.environ.get('LOCALAPPDATA', home / 'AppData/Local'))
    roaming_app_data = Path(os.environ.get('APPDATA', home / 'AppData/Roaming'))
    return [
        local_app_data / 'Packages/Microsoft.FlightSimulator_8wekyb3d8bbwe/LocalCache/UserCfg.opt',
        roaming_app_data / 'Microsoft Flight Simulator/UserCfg.opt',
        ]


def Read_Installed_Packages_Path(user_config_path):
    '''
    Returns the InstalledPackagesPath value from a UserCfg.opt file,
    as a Path. Raises Packages_Path_Exception if the line is missing.
    '''
    try:
        with open(user_config_path, 'r', encoding = 'utf-8', errors = 'replace') as file:
            lines = file.read().splitlines()
    except OSError as ex:
        raise Package_IO_Exception(
            'failed to read "{}": {}'.format(user_config_path, ex)) from ex

    # The line looks like: InstalledPackagesPath "D:\MSFS\Packages"
    for line in lines:
        if line.startswith('InstalledPackagesPath'):
            value = line[len('InstalledPackagesPath'):].strip()
            return Path(value.strip('"'))

    raise Packages_Path_Exception(
        'failed to find "InstalledPackagesPath" in "{}"'.format(user_config_path))


def Get_Packages_Path(settings = None):
    '''
    Returns the Path to the simulator packages folder. Uses the
    path_to_packages_folder setting if given, else searches the
    user config files.
    '''
    if settings == None:
        settings = Settings
    settings.Delayed_Init()

    if settings.path_to_packages_folder != None:
        return settings.path_to_packages_folder

    for user_config_path in Get_User_Config_Paths():
        if user_config_path.exists():
            return Read_Installed_Packages_Path(user_config_path)

    raise Packages_Path_Exception(
        'failed to resolve UserCfg.opt path; checked: {}'.format(
            ', '.join(str(x) for x in Get_User_Config_Paths())))


def Get_Package_Path(package_name, package_source = 'Community', settings = None):
    '''
    Returns the Path to a named package under the packages folder.

    * package_name
      - String, package folder name.
    * package_source
      - String, 'Community' or 'Official'.
    '''
    packages_path = Get_Packages_Path(settings)
    if package_source == 'Community':
        return packages_path / 'Community' / package_name
    elif package_source == 'Official':
        return packages_path / 'Official' / 'OneStore' / package_name
    raise AssertionError('package_source "{}" not recognized'.format(package_source))


def Read_Manifest(package_path):
    '''
    Returns the dict loaded from a package's manifest.json.
    Raises Package_Missing_Exception if not found.
    '''
    manifest_path = package_path / 'manifest.json'
    if not manifest_path.exists():
        raise Package_Missing_Exception(
            'unable to locate the package manifest file at "{}"'.format(manifest_path))
    try:
        with open(manifest_path, 'r', encoding = 'utf-8-sig') as file:
            return json.load(file)
    except OSError as ex:
        raise Package_IO_Exception(
            'failed to read "{}": {}'.format(manifest_path, ex)) from ex
    except ValueError as ex:
        raise Package_Missing_Exception(
            'package manifest "{}" is not valid json: {}'.format(manifest_path, ex)) from ex


def Create_Directory(path):
    '''
    Create a directory, along with any missing parents.
    '''
    Print("Creating directory: '{}'".format(path))
    try:
        path.mkdir(parents = True, exist_ok = True)
    except OSError as ex:
        raise Package_IO_Exception(
            'failed to create directory "{}": {}'.format(path, ex)) from ex
    return


def Remove_Directory(path):
    '''
    Remove a directory and all of its contents, if it exists.
    '''
    if not path.exists():
        return
    Print("Removing directory: '{}'".format(path))
    try:
        shutil.rmtree(path)
    except OSError as ex:
        raise Package_IO_Exception(
            'failed to remove directory "{}": {}'.format(path, ex)) from ex
    return


def Copy_File(source_path, dest_path):
    '''
    Copy a single file. Errors if the source is missing.
    '''
    Print("Copying file: From '{}' to '{}'".format(source_path, dest_path))
    try:
        shutil.copyfile(source_path, dest_path)
    except OSError as ex:
        raise Package_IO_Exception(
            'failed to copy "{}" to "{}": {}'.format(source_path, dest_path, ex)) from ex
    return


def Append_Text(path, text):
    '''
    Append utf-8 text to the end of an existing file.
    Newlines in the text are written as given.
    '''
    Print("Appending to file: '{}'".format(path))
    try:
        with open(path, 'a', encoding = 'utf-8', newline = '') as file:
            file.write(text)
    except OSError as ex:
        raise Package_IO_Exception(
            'failed to append to "{}": {}'.format(path, ex)) from ex
    return


def Write_Json(path, json_obj):
    '''
    Write a json object to a file, indented, keeping non-ascii text.
    '''
    Print("Writing file: '{}'".format(path))
    try:
        with open(path, 'w', encoding = 'utf-8') as file:
            json.dump(json_obj, file, indent = 4, ensure_ascii = False)
    except OSError as ex:
        raise Package_IO_Exception(
            'failed to write "{}": {}'.format(path, ex)) from ex
    return


def Read_Data_Text(path):
    '''
    Returns the text of an embedded data file, without newline
    translation.
    '''
    with open(path, 'r', encoding = 'utf-8', newline = '') as file:
        return file.read()
