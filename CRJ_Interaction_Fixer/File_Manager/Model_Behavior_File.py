'''
Reading and writing of model behavior files, eg. CRJ550_Interior.xml.

These files are technically invalid xml: they hold two sibling root
nodes, a ModelInfo header followed by the ModelBehaviors body, with
no enclosing document root. The simulator loader expects that layout
back, along with a leading blank line, so the header is carried as
text and only the body is parsed into an editable tree.
'''
__all__ = [
    'Fragment_Reader',
    'Model_Behavior_File',
    'Read_Model_Behavior_File',
    ]

import io
import re
from copy import deepcopy
from lxml import etree as ET

from ..Common import Malformed_Source_Document_Exception
from ..Common import Package_IO_Exception
from ..Common import Print

# An xml declaration at the top of a fragment, which would be invalid
#  once the fragment is wrapped in a root node.
_declaration_re = re.compile(r'^\s*<\?xml[^>]*\?>')


class Fragment_Reader:
    '''
    Streaming reader over xml text that may hold several top level
    elements. The text is wrapped in a synthetic root and parsed
    incrementally, with Read_To_Element used to advance to each
    top level element of interest in turn.

    Parameters:
    * text
      - String, the fragment contents, without an xml declaration.

    Attributes:
    * depth
      - Int, current nesting depth in the stream; the synthetic root
        is depth 1, top level fragment elements depth 2.
    '''
    wrapper_tag = 'Fragment_Root'

    def __init__(self, text):
        wrapped = '<{0}>{1}</{0}>'.format(self.wrapper_tag, text)
        self.depth = 0
        # Keep blank text, so that elements read verbatim keep their
        #  original whitespace.
        self._events = ET.iterparse(
            io.BytesIO(wrapped.encode('utf-8')),
            events = ('start', 'end'))
        return


    def Read_To_Element(self, tag):
        '''
        Advance the stream to the end of the next top level element with
        the given tag, skipping any others. Returns the completed
        Element, or None if the stream ends first.
        Raises lxml XMLSyntaxError if the text is not parseable.
        '''
        for event, element in self._events:
            if event == 'start':
                self.depth += 1
                continue
            self.depth -= 1
            # Top level fragment elements close back to the wrapper depth.
            if self.depth == 1 and element.tag == tag:
                return element
        return None


class Model_Behavior_File:
    '''
    Contents of one model behavior file, split into its header text
    and editable body.

    Parameters:
    * header_text
      - String, the serialized ModelInfo element, reproduced verbatim
        on output.
    * body_root
      - Element holding the parsed ModelBehaviors node.
    * file_source_path
      - Optional Path the file was read from, for messages.

    Attributes:
    * newline
      - String, line ending used for the body output.
    * indent
      - String, indentation per body nesting level.
    '''
    newline = '\r\n'
    indent = '\t'

    def __init__(
            self,
            header_text,
            body_root,
            file_source_path = None,
        ):
        self.header_text = header_text
        self.body_root = body_root
        self.file_source_path = file_source_path
        return


    def Get_Body_Text(self):
        '''
        Returns the body serialized as a string, tab indented, with
        CRLF newlines, and without an xml declaration.
        '''
        # Indent a copy, so the body_root itself stays as parsed.
        body_root = deepcopy(self.body_root)
        ET.indent(body_root, space = self.indent)
        text = ET.tostring(body_root, encoding = 'unicode')

        # Standardize newlines, including any within text content.
        text = text.replace('\r\n', '\n').replace('\n', self.newline)
        return text


    def Get_Text(self):
        '''
        Returns the full file text: a leading blank line, the verbatim
        header, then the body.
        '''
        return (self.newline
                + self.header_text
                + self.newline
                + self.Get_Body_Text())


    def Get_Binary(self):
        '''
        Returns the file text as utf-8 bytes, without a byte order mark.
        '''
        return self.Get_Text().encode('utf-8')


    def Write_File(self, file_path):
        '''
        Write these contents to the target file_path, creating any
        missing parent folders.
        '''
        # Get binary first, in case of error, then open the file to write.
        binary = self.Get_Binary()

        Print("Writing file: '{}'".format(file_path))
        try:
            if not file_path.parent.exists():
                file_path.parent.mkdir(parents = True)
            with open(file_path, 'wb') as file:
                file.write(binary)
        except OSError as ex:
            raise Package_IO_Exception(
                'failed to write "{}": {}'.format(file_path, ex)) from ex
        return


def Read_Model_Behavior_File(file_path):
    '''
    Read a model behavior file from disk, returning a Model_Behavior_File.
    Raises Malformed_Source_Document_Exception if the ModelInfo or
    ModelBehaviors top level element is missing, or the xml is broken,
    and Package_IO_Exception if the file cannot be read.

    * file_path
      - Path to the source file.
    '''
    try:
        with open(file_path, 'rb') as file:
            binary = file.read()
    except OSError as ex:
        raise Package_IO_Exception(
            'failed to read "{}": {}'.format(file_path, ex)) from ex

    # Vendor files are utf-8, possibly with a byte order mark.
    try:
        text = binary.decode('utf-8-sig')
    except UnicodeDecodeError as ex:
        raise Malformed_Source_Document_Exception(
            '"{}" is not utf-8 text: {}'.format(file_path, ex)) from ex
    text = _declaration_re.sub('', text, count = 1)

    reader = Fragment_Reader(text)
    try:
        # The header is kept as text, exactly as serialized from the source.
        header_node = reader.Read_To_Element('ModelInfo')
        if header_node is None:
            raise Malformed_Source_Document_Exception(
                '"{}" has no top level ModelInfo element'.format(file_path))
        header_text = ET.tostring(
            header_node, encoding = 'unicode', with_tail = False)

        body_node = reader.Read_To_Element('ModelBehaviors')
        if body_node is None:
            raise Malformed_Source_Document_Exception(
                '"{}" has no top level ModelBehaviors element following'
                ' ModelInfo'.format(file_path))
    except ET.XMLSyntaxError as ex:
        raise Malformed_Source_Document_Exception(
            'failed to parse "{}": {}'.format(file_path, ex)) from ex

    # Reparse the body with blank text stripped, so that it will
    #  re-indent cleanly on output.
    body_root = ET.XML(
        ET.tostring(body_node, with_tail = False),
        parser = ET.XMLParser(remove_blank_text = True))

    return Model_Behavior_File(
        header_text = header_text,
        body_root = body_root,
        file_source_path = file_path,
        )
