'''
Main function for the CRJ Interaction Fixer.
'''
import sys
import argparse

from .Common import Settings, Print, Get_Version, data_path
from .File_Manager.Package_Files import Read_Data_Text
from .Transforms import Build_Patch_Package


def Write_Welcome_Message(settings, wait = True):
    '''
    Print the welcome message, optionally waiting for Enter.
    When waiting, the message is shown even in quiet mode, since it
    holds the prompt.
    '''
    text = Read_Data_Text(data_path / 'Welcome_Message.txt')
    for key in ['original_package_name', 'patch_package_name',
                'original_package_version_requirement']:
        text = text.replace('{' + key + '}', str(getattr(settings, key)))
    text = text.replace('{version}', Get_Version())
    Print(text, force = wait)
    if wait:
        input()
    return


def Run(*args):
    '''
    Run the fixer, building the patch package.
    Command line args are optional; see -h for options.
    Returns 0 on success, 1 on error.
    '''
    argparser = argparse.ArgumentParser(
        prog = 'crj-interaction-fixer',
        description = 'Builds the {} package, version {}.'.format(
            Settings.patch_package_name, Get_Version()),
        allow_abbrev = False,
        )

    argparser.add_argument(
        '-packages',
        default = None,
        metavar = 'Path',
        help =  'Path to the simulator packages folder (holding Community).'
                ' If not given, it is read from UserCfg.opt.')

    argparser.add_argument(
        '-official',
        action = 'store_true',
        help =  'Look for the original package under Official/OneStore'
                ' instead of Community.')

    argparser.add_argument(
        '-allow_version_mismatch',
        action = 'store_true',
        help =  'Continue with a warning if the original package is not'
                ' the required version.')

    argparser.add_argument(
        '-yes',
        action = 'store_true',
        help =  'Skips waiting on the welcome message.')

    argparser.add_argument(
        '-quiet',
        action = 'store_true',
        help =  'Hides status messages; errors are still printed.')

    argparser.add_argument(
        '-dev',
        action = 'store_true',
        help =  'Enables developer mode, leaving exceptions uncaught.')

    args = argparser.parse_args(args)

    # Command line args override json or default settings.
    if args.packages:
        Settings.path_to_packages_folder = args.packages
    if args.official:
        Settings.package_source = 'Official'
    if args.allow_version_mismatch:
        Settings.allow_version_mismatch = True
    if args.yes:
        Settings.prompt_on_start = False
    if args.quiet:
        Settings.verbose = False
    if args.dev:
        Settings.developer = True
    Settings.Reset()

    Print.quiet = not Settings.verbose

    try:
        Write_Welcome_Message(Settings, wait = Settings.prompt_on_start)
        patch_package_path = Build_Patch_Package(Settings)

    except (KeyboardInterrupt, EOFError):
        # Ctrl+C, or a closed console at the prompt.
        Print.Error('cancelled')
        return 1

    except Exception as ex:
        if Settings.developer:
            raise
        # Give the exception name, and the message with paths and ids.
        Print.Error('{}: {}'.format(type(ex).__name__, ex))
        return 1

    Print('Finished building {}'.format(patch_package_path))
    return 0


def Main():
    '''
    Entry for the console script, passing through sys.argv.
    '''
    sys.exit(Run(*sys.argv[1:]))


if __name__ == '__main__':
    Main()
