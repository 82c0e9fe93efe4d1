'''
Support for the modification catalog: the list of knobs whose
momentary push gets swapped for the infinite push template, along with
the separate push button component each one replaces.

The catalog is a json document of the form:
    {
      "Modifications": [
        {
          "ButtonId"      : "...",
          "KnobId"        : "...",
          "KnobAnimName"  : "...",
          "KnobChangeName": "...",
          "PushAnimName"  : "...",
          "PushName"      : "..."
        },
        ...
      ]
    }
Record order is kept, though records are independent of each other.

Note: the ids and animation names in the embedded catalog
(Data/Model_Behavior_Modifications.json) were reconstructed from the
vendor naming scheme, not extracted from an installed vendor package.
Until they are checked against the vendor interior files, a run
against a real install is likely to stop with Node_Not_Found_Exception
on the first record; pass a verified catalog path to Load_Modifications
or correct the embedded file.
'''
import json
from collections import namedtuple

from ..Common import Modification_Catalog_Exception, data_path

# Use a named tuple to hold records, keeping them immutable.
Modification_Record = namedtuple(
    'Modification_Record',
    ['button_id', 'knob_id', 'knob_anim_name',
     'knob_change_name', 'push_anim_name', 'push_name'])

# Json field names, matched up with the record fields above.
_json_fields = ['ButtonId', 'KnobId', 'KnobAnimName',
                'KnobChangeName', 'PushAnimName', 'PushName']

default_catalog_path = data_path / 'Model_Behavior_Modifications.json'


def Parse_Modifications(json_dict):
    '''
    Returns a list of Modification_Records from an already loaded
    catalog dict. Raises Modification_Catalog_Exception on any
    missing or non-string field.
    '''
    if not isinstance(json_dict, dict) or 'Modifications' not in json_dict:
        raise Modification_Catalog_Exception(
            'catalog has no top level "Modifications" list')

    modifications = []
    for index, entry in enumerate(json_dict['Modifications']):
        values = []
        for field in _json_fields:
            value = entry.get(field) if isinstance(entry, dict) else None
            if not isinstance(value, str) or not value:
                raise Modification_Catalog_Exception(
                    'catalog entry {} has a missing or empty "{}"'.format(
                        index, field))
            values.append(value)
        modifications.append(Modification_Record(*values))
    return modifications


def Load_Modifications(catalog_path = None):
    '''
    Load the modification catalog, returning a list of
    Modification_Records in catalog order.

    * catalog_path
      - Optional path to a catalog json file.
      - Defaults to the catalog embedded with the package.
    '''
    if catalog_path == None:
        catalog_path = default_catalog_path

    try:
        with open(catalog_path, 'r', encoding = 'utf-8') as file:
            json_dict = json.load(file)
    except (OSError, ValueError) as ex:
        raise Modification_Catalog_Exception(
            'failed to load catalog "{}": {}'.format(catalog_path, ex)) from ex

    return Parse_Modifications(json_dict)
