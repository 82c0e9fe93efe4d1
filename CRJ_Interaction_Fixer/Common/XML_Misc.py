'''
XML helper functions, for use by transforms.
'''
from .Exceptions import Node_Not_Found_Exception, Ambiguous_Node_Exception


def Find_By_Attribute(base_node, attr_name, value, tag = None):
    '''
    Searches an xml node, and all of its children recursively, for
    elements with the given attribute value. Returns a list of matching
    nodes in document order, possibly empty with no matches.
    The base_node itself is included in the search.

    * base_node
      - Element to search from.
    * attr_name
      - String, name of the attribute, eg. 'ID'.
    * value
      - String, exact attribute value looked for.
    * tag
      - Optional string; if given, only elements with this tag match.
    '''
    found_nodes = []
    _Collect_Matches(base_node, attr_name, value, tag, found_nodes)
    return found_nodes


def _Collect_Matches(node, attr_name, value, tag, found_nodes):
    '''
    Recursive descent support for Find_By_Attribute.
    '''
    # Comments and processing instructions have non-string tags, and
    #  never carry attributes.
    if not isinstance(node.tag, str):
        return
    if (tag == None or node.tag == tag) and node.get(attr_name) == value:
        found_nodes.append(node)
    for child in node:
        _Collect_Matches(child, attr_name, value, tag, found_nodes)
    return


def Find_Single_By_Attribute(base_node, attr_name, value, tag = None):
    '''
    As Find_By_Attribute, but requires exactly one match, which is
    returned. Raises Node_Not_Found_Exception on no matches, or
    Ambiguous_Node_Exception on multiple matches.
    '''
    found_nodes = Find_By_Attribute(base_node, attr_name, value, tag)

    # Error if there isn't a single match.
    found_count = len(found_nodes)
    if found_count == 0:
        raise Node_Not_Found_Exception(
            'no {} found with {}="{}"'.format(tag or 'node', attr_name, value))
    elif found_count > 1:
        raise Ambiguous_Node_Exception(
            '{} {} nodes found with {}="{}"; expected 1'.format(
                found_count, tag or 'node', attr_name, value))
    return found_nodes[0]


def First_Child_Element(node):
    '''
    Returns the first child of the node that is an element, skipping
    comments and processing instructions, or None if there is none.
    '''
    for child in node:
        if isinstance(child.tag, str):
            return child
    return None


def Clear_Node(node, keep_attributes = ()):
    '''
    Removes all children, text, and attributes of the node, except
    for the named attributes. The node tail is left alone, so that
    the node stays in place within its parent formatting.
    '''
    kept = [(name, node.get(name)) for name in keep_attributes
            if node.get(name) != None]
    tail = node.tail
    # lxml clear also resets the tail; put it back after.
    node.clear()
    node.tail = tail
    for name, value in kept:
        node.set(name, value)
    return
