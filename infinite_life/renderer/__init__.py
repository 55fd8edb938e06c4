"""Rendering subpackage.

Turns chunk cell arrays into Pillow images and composites them into viewport
frames for a host application. The renderer focuses on:

* Per-chunk RGBA surfaces (live cells opaque, dead cells transparent) that a
  host positions at :attr:`infinite_life.chunk.Chunk.origin`.
* Viewport frames built by scaling and pasting the surfaces of every chunk the
  current :class:`infinite_life.view.ViewTransform` can see.

See :mod:`infinite_life.renderer.surface` and
:mod:`infinite_life.renderer.frame`.
"""
