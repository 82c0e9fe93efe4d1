'''
Transform swapping the momentary push on selected cockpit knobs for
the infinite push template.

In the vendor files, each of these knobs is a Component whose first
child references a one-shot push template, and the push action itself
is a separate button Component. The patch removes the button component,
and points the knob template reference at the infinite push template,
which handles both turning and pushing.
'''
from lxml import etree as ET

from ..Common import Settings, Node_Not_Found_Exception
from ..Common.XML_Misc import Find_Single_By_Attribute
from ..Common.XML_Misc import First_Child_Element, Clear_Node

# Parameter node tags added under the template reference, in the order
#  the infinite push template reads them, paired with record fields.
template_parameter_fields = [
    ('KNOB_ANIM_NAME'  , 'knob_anim_name'),
    ('KNOB_CHANGE_NAME', 'knob_change_name'),
    ('PUSH_ANIM_NAME'  , 'push_anim_name'),
    ('PUSH_NAME'       , 'push_name'),
    ]


def Patch_Knob_Push(body_root, modifications, template_name = None):
    '''
    Apply each modification record to a ModelBehaviors tree, editing
    it in place. Stops on the first record that fails to match,
    raising Node_Not_Found_Exception or Ambiguous_Node_Exception; the
    tree should then be discarded.

    * body_root
      - Element, the parsed ModelBehaviors node.
    * modifications
      - List of Modification_Records.
    * template_name
      - String, name of the infinite push template.
      - Defaults to Settings.infinite_push_template_name.
    '''
    if template_name == None:
        template_name = Settings.infinite_push_template_name

    for modification in modifications:
        Remove_Button(body_root, modification.button_id)
        Replace_Knob_Template(body_root, modification, template_name)
    return


def Remove_Button(body_root, button_id):
    '''
    Remove the single Component with the given ID, and its subtree.
    '''
    button_node = Find_Single_By_Attribute(body_root, 'ID', button_id, tag = 'Component')
    parent = button_node.getparent()
    if parent is None:
        raise Node_Not_Found_Exception(
            'button Component ID="{}" is the document root'.format(button_id))
    parent.remove(button_node)
    return


def Replace_Knob_Template(body_root, modification, template_name):
    '''
    Rewrite the template reference (first child element) of the knob
    Component for this modification to use the infinite push template,
    filled with the record's animation and event names.
    Returns the rewritten template reference node.
    '''
    knob_node = Find_Single_By_Attribute(
        body_root, 'ID', modification.knob_id, tag = 'Component')

    template_node = First_Child_Element(knob_node)
    if template_node is None:
        raise Node_Not_Found_Exception(
            'knob Component ID="{}" has no template reference child'.format(
                modification.knob_id))

    # Drop the old template parameters and any other attributes.
    Clear_Node(template_node)
    template_node.set('Name', template_name)

    for tag, field in template_parameter_fields:
        parameter_node = ET.SubElement(template_node, tag)
        parameter_node.text = getattr(modification, field)
    return template_node
