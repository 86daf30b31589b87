"""NiceGUI pages for the codebytes composer.

Import this module to register all page routes with NiceGUI.
"""

from codebytes.pages import composer
from codebytes.pages.dialogs import show_missing_language_dialog

__all__ = ["composer", "show_missing_language_dialog"]

# Touch modules to prevent linter from removing "unused" imports.
# These imports register @ui.page decorators as a side effect.
_PAGES = (composer,)
