"""
lexorder - Order keys that sort as strings and never need renumbering.

Usage example:

    import lexorder

    lex = lexorder.lex_order()
    a = lex.get(None, None)   # '80', the first key in an empty list
    b = lex.get(a, None)      # '8001', after a
    c = lex.get(a, b)         # '800080', between a and b
    assert a < c < b

Usage example:

    from lexorder import LexOrder, Converter256

    lex = LexOrder(Converter256(), spread_level=3)
"""


from .converter import SymbolConverter
from .converter import Converter256
from .converter import converter256
from .order import LexOrder
from .order import lex_order
from .order import SPREAD_LEVEL_DEFAULT

__all__ = [
    'SymbolConverter',
    'Converter256',
    'converter256',
    'LexOrder',
    'lex_order',
    'SPREAD_LEVEL_DEFAULT',
]

from . import version
__version__ = version.__doc__
