"""Rendering pipeline for Quill deltas, transport-agnostic.

Contains:
- options: render options and the attribute → tag map
- validator / attributes / newlines: per-op helpers used by the transform
- transform: delta → content items, including block normalization
- emitter: content items → HTML
- renderer: the public render entry points
"""
