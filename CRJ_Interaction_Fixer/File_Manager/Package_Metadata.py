'''
Generation of the two package descriptor files the simulator needs
to mount a package: layout.json, listing every content file, and
manifest.json, naming the package and its dependencies.
'''
from ..Common import Settings, Print
from .Package_Files import Write_Json

# Windows FILETIME counts 100 ns ticks since 1601-01-01.
_filetime_ticks_per_second = 10000000
_filetime_epoch_offset_seconds = 11644473600

# Descriptor files are never listed in the layout itself.
_descriptor_file_names = ['layout.json', 'manifest.json']


def Unix_To_Filetime(unix_time):
    '''
    Convert a unix timestamp (seconds, float) to a FILETIME integer.
    '''
    return int(round((unix_time + _filetime_epoch_offset_seconds)
                     * _filetime_ticks_per_second))


def Get_Layout(package_path):
    '''
    Returns a dict holding the layout content entries for all files
    under the package_path, sorted by path. Paths are relative with
    forward slashes.
    '''
    content = []
    for file_path in package_path.rglob('*'):
        if not file_path.is_file():
            continue
        relative_path = file_path.relative_to(package_path).as_posix()
        if relative_path in _descriptor_file_names:
            continue
        stat = file_path.stat()
        content.append({
            'path' : relative_path,
            'size' : stat.st_size,
            'date' : Unix_To_Filetime(stat.st_mtime),
            })
    content.sort(key = lambda x: x['path'])
    return {'content' : content}


def Make_Layout(package_path):
    '''
    Write layout.json for the package, returning its path.
    Should be called after all other package files are written.
    '''
    Print('Creating package layout')
    layout_path = package_path / 'layout.json'
    Write_Json(layout_path, Get_Layout(package_path))
    return layout_path


def Get_Manifest(original_manifest, settings = None):
    '''
    Returns a dict holding the patch package manifest contents, with
    a dependency on the original package.

    * original_manifest
      - Dict loaded from the original package manifest.json; its
        minimum_game_version is carried over.
    '''
    if settings == None:
        settings = Settings
    return {
        'dependencies' : [
            {
                'name'            : settings.original_package_name,
                'package_version' : settings.original_package_version_requirement,
            },
        ],
        'content_type'         : 'CORE',
        'title'                : settings.patch_package_title,
        'manufacturer'         : '',
        'creator'              : '',
        'package_version'      : settings.patch_package_version,
        'minimum_game_version' : original_manifest.get('minimum_game_version', ''),
        'release_notes'        : {},
        }


def Make_Manifest(package_path, original_manifest, settings = None):
    '''
    Write manifest.json for the package, returning its path.
    '''
    Print('Creating package manifest')
    manifest_path = package_path / 'manifest.json'
    Write_Json(manifest_path, Get_Manifest(original_manifest, settings))
    return manifest_path
