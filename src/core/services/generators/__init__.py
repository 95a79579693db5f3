"""
Generators — turn a BuildConfiguration into files.

``profiles`` holds the per-ecosystem rule table; ``dockerfile`` and
``compose`` each expose a ``render_*()`` function returning text and a
``generate_*()`` function returning a ``GeneratedFile``.
"""
