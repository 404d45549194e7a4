import json
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from flattree.utils.errors import ParseError, SerializationError

_SUFFIX_FORMATS = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".xml": "xml",
}


class FileFormatsHandler:

    @staticmethod
    def parse(content: str, format_type: str = "json") -> Any:
        """
        Parse string content into Python data.

        Args:
            content: Text to parse
            format_type: 'json', 'yaml', 'xml' or 'auto' (JSON, then XML, then YAML)

        Returns:
            The parsed dict / list / scalar

        Raises:
            ParseError: If the content is not well-formed in the requested format
        """
        format_type = format_type.lower()

        if format_type == "json":
            try:
                return json.loads(content)
            except (json.JSONDecodeError, TypeError) as e:
                raise ParseError(f"Invalid JSON: {e}") from e

        if format_type in ("yaml", "yml"):
            try:
                return yaml.safe_load(content)
            except yaml.YAMLError as e:
                raise ParseError(f"Invalid YAML: {e}") from e

        if format_type == "xml":
            try:
                return FileFormatsHandler.xml_to_dict(content)
            except ET.ParseError as e:
                raise ParseError(f"Invalid XML: {e}") from e

        if format_type == "auto":
            return FileFormatsHandler.convert_string_to_json(content)

        raise ValueError(f"Unsupported format type: {format_type}")

    @staticmethod
    def convert_string_to_json(content: str) -> Any:
        """
        Parses string content (JSON, YAML, XML) into a Python Dictionary/List.
        """
        content = content.strip()

        # Try JSON
        try:
            return json.loads(content)
        except json.JSONDecodeError:
            pass

        # Try XML
        if content.startswith('<'):
            try:
                return FileFormatsHandler.xml_to_dict(content)
            except ET.ParseError:
                pass

        # Try YAML
        try:
            data = yaml.safe_load(content)
            if data is not None and not isinstance(data, str):
                return data
        except yaml.YAMLError:
            pass

        raise ParseError("Unable to parse content as JSON, YAML, or XML")

    @staticmethod
    def xml_to_dict(xml_string: str) -> Dict[str, Any]:
        """
        Convert XML string to dictionary.

        Attributes land under '@attributes', mixed text under '#text', and
        repeated child tags become lists.
        """

        def parse_element(element):
            result = {}

            if element.attrib:
                result['@attributes'] = dict(element.attrib)

            # Handle text content
            if element.text and element.text.strip():
                if len(element) == 0:  # No child elements
                    if not result:
                        return element.text.strip()
                result['#text'] = element.text.strip()

            children = {}
            for child in element:
                child_data = parse_element(child)
                if child.tag in children:
                    # Multiple elements with same tag - convert to list
                    if not isinstance(children[child.tag], list):
                        children[child.tag] = [children[child.tag]]
                    children[child.tag].append(child_data)
                else:
                    children[child.tag] = child_data

            result.update(children)
            if not result:
                return None
            return result

        root = ET.fromstring(xml_string)
        return {root.tag: parse_element(root)}

    @staticmethod
    def dump(data: Any, indent: Optional[int] = None) -> str:
        """
        Serialize data to JSON text. Compact unless ``indent`` is given.

        Raises:
            SerializationError: If a value has no JSON form (NaN, datetime...)
        """
        try:
            if indent is None:
                return json.dumps(data, ensure_ascii=False, allow_nan=False, separators=(",", ":"))
            return json.dumps(data, ensure_ascii=False, allow_nan=False, indent=indent)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Cannot serialize flattened output: {e}") from e

    @staticmethod
    def load_file(input_file: Union[str, Path]) -> Any:
        """
        Read and parse a JSON, YAML or XML file, picking the format from its extension.

        Raises:
            FileNotFoundError: If input file doesn't exist
            ValueError: If file format is not supported
            ParseError: If the file content is malformed
        """
        input_path = Path(input_file)

        if not input_path.exists():
            raise FileNotFoundError(f"Input file not found: {input_file}")

        file_extension = input_path.suffix.lower()
        format_type = _SUFFIX_FORMATS.get(file_extension)
        if format_type is None:
            raise ValueError(f"Unsupported file format: {file_extension}")

        with open(input_path, 'r', encoding='utf-8') as f:
            return FileFormatsHandler.parse(f.read(), format_type)
