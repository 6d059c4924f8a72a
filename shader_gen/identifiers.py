from __future__ import annotations

SEPARATORS = frozenset("/\\_.")


def derive_identifier(name: str) -> str:
    """
    CamelCase identifier for a filename: ``basic_light.vert`` -> ``BasicLightVert``.

    Separators are dropped, so names differing only in ``_`` vs ``.`` collide
    (``a_b.frag`` and ``a.b.frag`` both give ``ABFrag``).
    """
    out = []
    capitalise_next = True
    for ch in name:
        if ch in SEPARATORS:
            capitalise_next = True
            continue
        out.append(ch.upper() if capitalise_next else ch.lower())
        capitalise_next = False
    return "".join(out)
