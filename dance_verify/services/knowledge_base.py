"""
Knowledge Base Lookup
Krump lineage table used to cross-check attribution claims.
"""

from types import MappingProxyType

from dance_verify.services.styles import SPECIALTY_STYLE

KNOWN_KRUMP_MOVES = MappingProxyType({
    "chest pop": MappingProxyType({"creator": "Tight Eyez", "era": "2000-2004"}),
    "arm swing": MappingProxyType({"creator": "Tight Eyez", "era": "2000-2004"}),
    "stomp": MappingProxyType({"creator": "Big Mijo", "era": "2000-2004"}),
    "buck": MappingProxyType({"creator": "Community", "era": "2004-2008"}),
    "kill off": MappingProxyType({"creator": "Various", "era": "2005+"}),
    "jab": MappingProxyType({"creator": "Community", "era": "2002+"}),
})


def lookup_attribution(move_name, style, claimed_creator):
    """
    Cross-reference a claimed creator against the lineage table.
    Returns None unless the style is krump and the move is known, otherwise
    {"known_origin": {"creator", "era"}, "match": bool}.
    """
    if style != SPECIALTY_STYLE:
        return None

    known = KNOWN_KRUMP_MOVES.get(move_name.lower().strip())
    if known is None:
        return None

    return {
        "known_origin": dict(known),
        "match": known["creator"].lower() == claimed_creator.lower(),
    }
