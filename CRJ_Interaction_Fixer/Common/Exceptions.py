'''
Container for exception messages.
'''

class Malformed_Source_Document_Exception(Exception):
    '''
    Exception raised when a model behavior file is missing one of its
    top level ModelInfo or ModelBehaviors elements, or cannot be
    parsed at all.
    '''

class Node_Not_Found_Exception(Exception):
    '''
    Exception raised when a modification record's button or knob id
    does not match any node, or a knob has no template reference child.
    '''

class Ambiguous_Node_Exception(Exception):
    '''
    Exception raised when a modification record's button or knob id
    matches more than one node.
    '''

class Modification_Catalog_Exception(Exception):
    '''
    Exception raised when the modification catalog json is missing
    fields or is otherwise malformed.
    '''

class Package_IO_Exception(Exception):
    '''
    Exception raised when reading, writing, or creating package files
    or directories fails. The message includes the path, and the
    underlying OSError is chained as the cause.
    '''

class Packages_Path_Exception(Exception):
    '''
    Exception raised when the simulator packages folder cannot be
    found from the user config.
    '''

class Package_Missing_Exception(Exception):
    '''
    Exception raised when the original vendor package, or its manifest,
    is not found.
    '''

class Package_Version_Exception(Exception):
    '''
    Exception raised when the installed vendor package is not the
    version this patch was built against.
    '''
