"""
Challenge Input Loader
Reads hex/base64/text challenge files into ByteBuffers

Files hold either one encoded string per line or a single blob wrapped
across several lines.
"""

from pathlib import Path
from typing import Callable, Dict, List, Union

from .raw_bytes import ByteBuffer


DECODERS: Dict[str, Callable[[str], ByteBuffer]] = {
    'hex': ByteBuffer.from_hex,
    'base64': ByteBuffer.from_base64,
    'text': ByteBuffer.from_text,
}


class ChallengeLoader:
    """
    Loads encoded challenge data from files or strings

    Decoding errors (e.g. MalformedInput on a bad hex line) propagate.
    """

    def __init__(self, encoding: str = 'hex'):
        """
        Initialize loader

        Args:
            encoding: One of 'hex', 'base64', 'text'
        """
        if encoding not in DECODERS:
            raise ValueError(f"Unknown encoding: {encoding}. Available: {list(DECODERS)}")
        self.encoding = encoding
        self.decode = DECODERS[encoding]

    def load_lines(self, file_path: Union[str, Path]) -> List[ByteBuffer]:
        """One buffer per non-empty line"""
        return self.parse_lines(self._read(file_path))

    def load_blob(self, file_path: Union[str, Path]) -> ByteBuffer:
        """Whole file as a single buffer, lines joined"""
        return self.parse_blob(self._read(file_path))

    def parse_lines(self, content: str) -> List[ByteBuffer]:
        return [self.decode(line.strip()) for line in content.splitlines() if line.strip()]

    def parse_blob(self, content: str) -> ByteBuffer:
        if self.encoding == 'text':
            return self.decode(content)
        return self.decode(''.join(line.strip() for line in content.splitlines()))

    def _read(self, file_path: Union[str, Path]) -> str:
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        with open(file_path, 'r', encoding='latin-1') as f:
            return f.read()
