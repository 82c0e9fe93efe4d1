'''
Container for general fixer settings.
Import as:
    from Settings import Settings

'''
from pathlib import Path
import json
from .Home_Path import home_path
from .Print import Print

class Settings_class:
    r'''
    This holds general settings and paths to control the fixer.
    Adjust these settings as needed prior to building the patch package,
    using direct writes to attributes.

    Settings may be updated individually, or as arguments of
    a call to Settings, or through a "settings.json" file in the
    working directory or the package folder.
    Any json settings will overwrite defaults, and be overwritten by
    command line arguments.

    Examples:
    * From python (prefix paths with 'r' to support backslashes):
      <code>
          Settings.path_to_packages_folder = r'C:\...'
          Settings(
               path_to_packages_folder = r'C:\...',
               allow_version_mismatch  = True,
               )
      </code>
    * In settings.json:
      <code>
          {
            "path_to_packages_folder": "C:\...",
            "prompt_on_start"        : "false"
          }
      </code>

    Paths:
    * path_to_packages_folder
      - Path to the simulator packages folder, the one holding
        the Community and Official folders.
      - Defaults to None, in which case it is read from the
        InstalledPackagesPath line of the user UserCfg.opt.
    * package_source
      - String, which packages subfolder holds the original package.
      - One of 'Community' or 'Official'; the patch package is always
        written to Community.
      - Defaults to 'Community'

    Packages:
    * original_package_name
      - String, folder name of the vendor package being patched.
      - Defaults to 'aerosoft-crj'
    * original_package_version_requirement
      - String, the vendor package_version the modification catalog
        was built against.
      - Defaults to '1.0.6'
    * allow_version_mismatch
      - Bool, if True then a vendor package of another version only
        prints a warning instead of stopping the run.
      - Defaults to False
    * patch_package_name
      - String, folder name of the generated patch package.
      - Any prior package of this name is removed at the start of a run.
      - Defaults to 'aerosoft-crj-interaction-fix'
    * patch_package_version
      - String, package_version written to the patch manifest.
      - Defaults to '1.0.0'
    * patch_package_title
      - String, title written to the patch manifest.
      - Defaults to 'Aerosoft CRJ Cockpit Interaction Fix'

    Model behaviors:
    * infinite_push_template_name
      - String, template name written into patched knob template
        references. Must match the Template in the embedded
        infinite push fragment.
      - Defaults to 'ASCRJ_Knob_Infinite_Push_Template'
    * templates_file_name
      - String, name of the vendor templates file under
        ModelBehaviorDefs which receives the infinite push fragment.
      - Defaults to 'ASCRJ_Templates.xml'
    * aircraft_variants
      - List of [airplane_id, model_behavior_file_name] pairs, one per
        aircraft folder under SimObjects/Airplanes to patch.
      - Defaults to the CRJ 550 and CRJ 700.

    Behavior:
    * prompt_on_start
      - Bool, if True the welcome message waits for Enter before
        doing anything.
      - Defaults to True
    * verbose
      - Bool, if True status messages are printed to the console.
      - Defaults to True
    * developer
      - Bool, if True then exceptions are left uncaught, for tracebacks.
      - Defaults to False
    '''
    def __init__(self):

        # Fill in initial defaults.
        for field, default in self.Get_Defaults().items():
            setattr(self, field, default)

        # Very early call to look for a json file to overwrite detaults.
        self.Load_Json()

        # Flag to track if delayed init has completed.
        self._init_complete = False
        return


    def Reset(self):
        '''
        Resets the settings, such that Delayed_Init will be run
        again. For use when paths may be changed since a prior run.
        '''
        self._init_complete = False
        return


    def Get_Defaults(self):
        '''
        Returns a dict holding fields and their default values.
        '''
        defaults = {}
        defaults['path_to_packages_folder'] = None
        defaults['package_source'] = 'Community'
        defaults['original_package_name'] = 'aerosoft-crj'
        defaults['original_package_version_requirement'] = '1.0.6'
        defaults['allow_version_mismatch'] = False
        defaults['patch_package_name'] = 'aerosoft-crj-interaction-fix'
        defaults['patch_package_version'] = '1.0.0'
        defaults['patch_package_title'] = 'Aerosoft CRJ Cockpit Interaction Fix'
        defaults['infinite_push_template_name'] = 'ASCRJ_Knob_Infinite_Push_Template'
        defaults['templates_file_name'] = 'ASCRJ_Templates.xml'
        defaults['aircraft_variants'] = [
            ['Aerosoft_CRJ_550', 'CRJ550_Interior.xml'],
            ['Aerosoft_CRJ_700', 'CRJ700_Interior.xml'],
            ]
        defaults['prompt_on_start'] = True
        defaults['verbose'] = True
        defaults['developer'] = False
        return defaults


    def Load_Json(self):
        '''
        Look for a "settings.json" file in the working directory or the
        package folder, and load defaults from it.
        Returns a list of field names updated.
        '''
        fields_updated = []

        for json_path in [Path('settings.json'), home_path / 'settings.json']:
            if not json_path.exists():
                continue

            # A malformed json is reported and otherwise ignored.
            try:
                with open(json_path, 'r') as file:
                    json_dict = json.load(file)
            except (OSError, ValueError) as ex:
                Print(('Skipping load of "settings.json" due to {}.'
                        ).format(type(ex).__name__))
                return fields_updated

            # Do some replacements of strings for normal types;
            #  unfortunately json.load doesn't do this automatically.
            replacements_dict = {
                'true' : True,
                'True' : True,
                '1'    : True,
                'false': False,
                'False': False,
                '0'    : False,
                }

            # Only apply bool replacements to fields that default to bools,
            #  so that a path or name matching one of these is left alone.
            defaults = self.Get_Defaults()

            for key, value in json_dict.items():
                if key not in defaults:
                    Print(('Entry "{}" in settings.json not recognized; skipping.'
                           ).format(key))
                    continue

                if isinstance(defaults[key], bool):
                    value = replacements_dict.get(value, value)
                elif defaults[key] == None:
                    # Convert none to None for paths.
                    if value == 'none':
                        value = None

                setattr(self, key, value)
                fields_updated.append(key)

            # Don't want to check other json files.
            break
        return fields_updated


    def __call__(self, *args, **kwargs):
        '''
        Convenience function for applying settings by calling
        the settings object with fields to set.
        '''
        # Ignore args; just grab kwargs.
        for name, value in kwargs.items():
            # Warn on unexpected names.
            if not hasattr(self, name):
                Print('Warning: setting "{}" not recognized'.format(name))
            else:
                setattr(self, name, value)
        # Reset to pre-init state, so the new paths get checked.
        self.Reset()
        return


    def Delayed_Init(self):
        '''
        Converts path settings to Path objects and checks for simple
        mistakes. Raises AssertionError on a bad setting.
        Sets _init_complete if no errors are found.
        '''
        if self._init_complete:
            return

        if self.path_to_packages_folder != None:
            self.path_to_packages_folder = Path(self.path_to_packages_folder).resolve()

        if self.package_source not in ['Community', 'Official']:
            raise AssertionError(
                'package_source "{}" not recognized; expected Community'
                ' or Official.'.format(self.package_source))

        if self.original_package_name == self.patch_package_name:
            raise AssertionError(
                'patch_package_name matches original_package_name "{}";'
                ' the original package would be overwritten.'.format(
                    self.patch_package_name))

        # Variants may come from json as lists; normalize to tuples.
        self.aircraft_variants = [tuple(x) for x in self.aircraft_variants]
        for variant in self.aircraft_variants:
            if len(variant) != 2:
                raise AssertionError(
                    'aircraft_variants entry {} should be an'
                    ' [airplane_id, file_name] pair.'.format(list(variant)))

        self._init_complete = True
        return


# General settings object, to be referenced by any place so interested.
Settings = Settings_class()
