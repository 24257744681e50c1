"""
JsDoc core - builds per-file graphs of documented JavaScript symbols.
"""
