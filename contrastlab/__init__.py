"""contrastlab: WCAG contrast checks and accessible color variants."""

__version__ = "1.0.0"

from contrastlab.core.contrast import (  # noqa: E402
    contrast_ratio,
    get_wcag_report,
    passes_wcag,
    required_ratio,
)
from contrastlab.core.conversions import (  # noqa: E402
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    is_valid_hex,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
)
from contrastlab.core.errors import InvalidColorFormat, NoAccessibleVariant  # noqa: E402
from contrastlab.core.luminance import relative_luminance  # noqa: E402
from contrastlab.core.types import (  # noqa: E402
    HSL,
    RGB,
    Palette,
    PaletteRequest,
    VariantRequest,
    VariantResult,
    WcagCheck,
)
from contrastlab.logic.palette.engine import generate_palette  # noqa: E402
from contrastlab.logic.variant.engine import (  # noqa: E402
    darken_color,
    find_accessible_variant,
    lighten_color,
    search_variant,
)
