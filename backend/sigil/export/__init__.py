"""Static exports of the settled constellation."""

from sigil.export.naming import export_filename
from sigil.export.raster import copy_to_clipboard, export_raster, to_data_url
from sigil.export.vector import export_svg

__all__ = ["copy_to_clipboard", "export_filename", "export_raster", "export_svg", "to_data_url"]
