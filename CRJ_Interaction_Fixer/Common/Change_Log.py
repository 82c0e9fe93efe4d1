'''
Change Log:
 * 1.0.0
   - Initial version.
   - Patches the CRJ 550 and CRJ 700 interior model behaviors, swapping
     the momentary push on flight control panel knobs for an infinite
     push template.
   - Generates the patch package manifest.json and layout.json.
 * 1.0.1
   - Packages folder may be given on the command line or in
     settings.json, skipping the UserCfg.opt search.
   - Model folders are processed in sorted order.
   - Missing ModelInfo/ModelBehaviors elements, and unmatched or
     ambiguous modification ids, now stop the run with an error
     naming the file and id.
'''

def Get_Version():
    '''
    Returns the highest version number in the change log,
    as a string, eg. '1.0.1'.
    '''
    # Traverse the docstring, looking for ' *' lines, and keep recording
    #  strings as they are seen.
    version = ''
    for line in __doc__.splitlines():
        if not line.startswith(' *'):
            continue
        version = line.split('*')[1].strip()
    return version
