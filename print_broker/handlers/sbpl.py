"""
SBPL Encoder
============

Label encoder for SATO printers using SBPL (SATO Barcode Printer Language).

A label is framed by STX ... ETX; every command starts with ESC. The barcode
value is wrapped in ``*`` start/stop characters and is not escaped, so a
value containing ``*`` breaks the framing.

Python's ``shift_jis`` codec writes ``¥`` as 0x5C and ``‾`` as 0x7E, which
SATO firmware prints as yen sign and overline but which decode back as
``\\`` and ``~``.
"""

from ..config import SBPL_ENCODING, SBPL_PAPER_HEIGHT, SBPL_PAPER_WIDTH
from ..errors import EncodeError

# SBPL Control Codes
STX = '\x02'  # Start of text
ETX = '\x03'  # End of text
ESC = '\x1b'

# Barcode start/stop character
DELIMITER = '*'

# Field layout (dots)
TITLE_POSITION = (50, 100)     # (vertical, horizontal)
BARCODE_POSITION = (150, 100)
CAPTION_POSITION = (270, 150)

TITLE_PITCH = '02'
TITLE_ENLARGEMENT = '0202'     # 2x horizontal, 2x vertical
BARCODE_SYMBOLOGY = '1'        # CODE39
BARCODE_NARROW_WIDTH = '03'
BARCODE_HEIGHT = '100'


def _position(vertical: int, horizontal: int) -> str:
    return f'{ESC}V{vertical:04d}{ESC}H{horizontal:04d}'


def _encode(text: str) -> bytes:
    try:
        return text.encode(SBPL_ENCODING)
    except UnicodeEncodeError as e:
        raise EncodeError(
            f'Cannot encode {text[e.start:e.end]!r} as {SBPL_ENCODING}'
        ) from e


def build_label(title: str, barcode: str) -> bytes:
    """
    Build an SBPL title + barcode label.

    Args:
        title: Text printed large at the top of the label
        barcode: CODE39 value, also printed as a caption under the bars

    Returns:
        Complete SBPL command bytes
    """
    wrapped = f'{DELIMITER}{barcode}{DELIMITER}'

    commands = [
        STX,
        f'{ESC}A',                                              # Start of label format
        f'{ESC}A1{SBPL_PAPER_HEIGHT:04d}{SBPL_PAPER_WIDTH:04d}',  # Paper size

        # Title
        _position(*TITLE_POSITION),
        f'{ESC}P{TITLE_PITCH}',
        f'{ESC}L{TITLE_ENLARGEMENT}',
        f'{ESC}XM{title}',

        # Barcode
        _position(*BARCODE_POSITION),
        f'{ESC}B{BARCODE_SYMBOLOGY}{BARCODE_NARROW_WIDTH}{BARCODE_HEIGHT}{wrapped}',

        # Human readable caption
        _position(*CAPTION_POSITION),
        f'{ESC}XS{wrapped}',
    ]
    trailer = [
        f'{ESC}Q1',  # Print 1 label
        f'{ESC}Z',   # End of label format
        ETX,
    ]

    # Shift_JIS is stateless, so separately encoded halves concatenate safely
    data = bytearray()
    data.extend(_encode(''.join(commands)))
    data.extend(_encode(''.join(trailer)))

    return bytes(data)
