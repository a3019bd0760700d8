#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AAA_LARGE = 4.5               # Enhanced contrast for large text (Level AAA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_MIN_RATIO = 1.0               # Lower bound of the contrast ratio
WCAG_MAX_RATIO = 21.0              # Upper bound of the contrast ratio (black on white)
WCAG_LUMINANCE_OFFSET = 0.05       # Flare offset in the (L + 0.05) contrast formula

# APCA-W3 0.0.98G Constants (Source: https://github.com/Myndex/apca-w3)
APCA_LUMA_R = 0.2126729            # sRGB red coefficient for APCA screen luminance
APCA_LUMA_G = 0.7151522            # sRGB green coefficient for APCA screen luminance
APCA_LUMA_B = 0.0721750            # sRGB blue coefficient for APCA screen luminance
APCA_NORM_TXT = 0.57               # Text exponent, normal polarity (dark text on light bg)
APCA_NORM_BG = 0.56                # Background exponent, normal polarity
APCA_REV_TXT = 0.62                # Text exponent, reverse polarity (light text on dark bg)
APCA_REV_BG = 0.65                 # Background exponent, reverse polarity
APCA_SCALE = 1.14                  # Output scaling factor
APCA_OFFSET = 0.027                # Low-contrast offset applied after scaling
APCA_CLIP = 0.1                    # Raw contrast below which Lc is clipped to zero

# APCA readability levels (Lc thresholds)
APCA_LEVELS = (
    (75, "Preferred"),             # Body text at any size
    (60, "Body"),                  # Body text at 16px+ / 400 weight
    (45, "Large"),                 # Large or bold text
    (30, "UI"),                    # Non-text UI and spot text
)

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
HUE_SECTOR = 60.0                  # Degrees per HSL/HSV sector
PERCENT = 100.0                    # Scale of HSL/HSV/CMYK percentage fields

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# Linear sRGB to LMS matrix (Source: Björn Ottosson, 2020, https://bottosson.github.io/posts/oklab/)
OKLAB_CUBE_ROOT_EXP = 1.0 / 3.0    # Power exponent for perceptual LMS non-linearity
M1_RGB_TO_LMS = (
    (0.4122214708, 0.5363325363, 0.0514459929),  # Long-wavelength (L) cone response
    (0.2119034982, 0.6806995451, 0.1073969566),  # Medium-wavelength (M) cone response
    (0.0883024619, 0.2817188376, 0.6299787005),  # Short-wavelength (S) cone response
)

# LMS' to OKLab matrix (perceptual lightness and opponency)
M2_LMS_TO_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),  # Lightness (L)
    (1.9779984951, -2.4285922050, 0.4505937099),  # Green-red opponent axis (a)
    (0.0259040371, 0.7827717662, -0.8086757660),  # Blue-yellow opponent axis (b)
)

# OKLab to LMS' matrix (inverse stage part 1, L column is implicitly 1.0)
M2_INV_OKLAB_TO_LMS = (
    (0.3963377774, 0.2158037573),      # Contribution of (a, b) to L'
    (-0.1055613458, -0.0638541728),    # Contribution of (a, b) to M'
    (-0.0894841775, -1.2914855480),    # Contribution of (a, b) to S'
)

# LMS to linear sRGB matrix (inverse stage part 2)
M1_INV_LMS_TO_RGB = (
    (4.0767416621, -3.3077115913, 0.2309699292),   # Linear red
    (-1.2684380046, 2.6097574011, -0.3413193965),  # Linear green
    (-0.0041960863, -0.7034186147, 1.7076147010),  # Linear blue
)

# Color Vision Deficiency Simulation Matrices, applied to linear RGB (row-major)
CVD_MATRICES = {
    "normal": (
        (1.0, 0.0, 0.0),
        (0.0, 1.0, 0.0),
        (0.0, 0.0, 1.0),
    ),
    "protanopia": (
        (0.152, 1.053, -0.205),     # Red-blindness (L-cone absent)
        (0.115, 0.786, 0.099),
        (-0.004, -0.048, 1.052),
    ),
    "deuteranopia": (
        (0.367, 0.861, -0.228),     # Green-blindness (M-cone absent)
        (0.280, 0.673, 0.047),
        (-0.012, 0.043, 0.969),
    ),
    "tritanopia": (
        (1.256, -0.077, -0.179),    # Blue-blindness (S-cone absent)
        (-0.079, 0.931, 0.148),
        (0.005, 0.691, 0.304),
    ),
    "achromatopsia": (
        (0.299, 0.587, 0.114),      # Total color blindness (luma only)
        (0.299, 0.587, 0.114),
        (0.299, 0.587, 0.114),
    ),
    "deuteranomaly": (
        (0.531, 0.566, -0.097),     # Weakened M-cone response
        (0.176, 0.764, 0.060),
        (-0.004, 0.040, 0.964),
    ),
}

# ==========================================
# Gamut Mapping
# ==========================================

GAMUT_MAP_BINARY_SEARCH_ITERATIONS = 32   # Upper bound on chroma bisection steps
GAMUT_MAP_WIDTH = 1e-4                    # Bisection stops once the chroma interval is this narrow
ACHROMATIC_CHROMA = 1e-4                  # Chroma treated as gray by the gamut mapper
CHROMA_CEILING = 0.37                     # sRGB-safe upper bound for synthesized chroma
MAX_CHROMA_SEARCH = 0.5                   # Start of the max-chroma search interval
RGB_CLAMP_TOLERANCE_LOWER = -0.5          # Lower bound tolerance for the in-gamut test (8-bit units)
RGB_CLAMP_TOLERANCE_UPPER = 255.5         # Upper bound tolerance for the in-gamut test (8-bit units)

# Contrast fix search (OKLCH lightness bisection)
CONTRAST_BINARY_SEARCH_ITERATIONS = 32    # Upper bound on lightness bisection steps
CONTRAST_SEARCH_WIDTH = 0.001             # Stop once the lightness interval is this narrow
CONTRAST_CHROMA_DAMPING = 0.3             # Chroma loss per unit of lightness travelled
CONTRAST_BG_LUM_SPLIT = 0.5               # Backgrounds brighter than this push text darker

# ==========================================
# Harmony Generator
# ==========================================

# Hue anchors relative to the base hue (degrees)
HARMONY_ANCHORS = {
    "complementary": (0, 180),
    "split-comp": (0, 150, 210),
    "triadic": (0, 120, 240),
    "tetradic": (0, 90, 180, 270),
    "square": (0, 90, 180, 270),
    "analogous": (-60, -30, 0, 30, 60),
    "double-split": (-30, 0, 30, 150, 210),
    "compound": (0, 150, 180, 210),
}

# Matsuda harmonic templates as (center, width) arcs (Source: Cohen-Or et al., 2006)
MATSUDA_TEMPLATES = {
    "matsuda_L": ((0.0, 79.2), (90.0, 18.0)),
    "matsuda_Y": ((0.0, 93.6), (180.0, 18.0)),
    "matsuda_X": ((0.0, 93.6), (180.0, 93.6)),
    "matsuda_T": ((0.0, 180.0),),
}

# Supported modes with display label and description, in menu order
HARMONY_MODES = {
    "analogous": ("Analogous", "Adjacent hues, harmonious and serene"),
    "complementary": ("Complementary", "Colors opposite on the wheel, high contrast"),
    "split-comp": ("Split-Comp", "A base plus two hues adjacent to its complement"),
    "triadic": ("Triadic", "Three evenly spaced hues, vibrant and diverse"),
    "tetradic": ("Tetradic", "Four hues in two complementary pairs"),
    "square": ("Square", "Four hues equally spaced at 90 degrees"),
    "monochromatic": ("Monochromatic", "One hue, varying saturation and lightness"),
    "shades": ("Shades & Tints", "Deep shadow to bright highlight on one hue"),
    "double-split": ("Double Split", "Two split-complementary pairs"),
    "compound": ("Compound", "Near-complementary, sophisticated and nuanced"),
    "natural": ("Natural", "Muted, organic, naturalistic tones"),
    "random": ("Random", "Golden-angle hue stepping"),
    "matsuda_L": ("Matsuda L", "Large cluster plus a small accent at 90 degrees"),
    "matsuda_Y": ("Matsuda Y", "Wide cluster with a single complement accent"),
    "matsuda_X": ("Matsuda X", "Two opposite clusters, bold complementary spread"),
    "matsuda_T": ("Matsuda T", "Half-wheel dominance, warm or cool palette"),
}

GOLDEN_ANGLE = 137.508             # Hue step for the random mode (degrees)

# Random base color ranges (HSL percent)
BASE_S_MIN, BASE_S_SPAN = 40.0, 50.0
BASE_L_MIN, BASE_L_SPAN = 35.0, 35.0

# Jitter widths and clamps for anchor placement (HSL percent)
ANCHOR_S_JITTER = 15.0             # Saturation jitter around base
ANCHOR_S_RANGE = (25.0, 95.0)      # Saturation clamp for anchor and seed fill stops
ANCHOR_L_RANGE = (20.0, 80.0)      # Lightness clamp for anchor and seed fill stops
CYCLE_L_SPAN = 40.0                # Total lightness spread across repeated anchor cycles
SINGLE_CYCLE_L_JITTER = 22.0       # Lightness jitter width when anchors fit in one cycle
SEED_L_JITTER = 30.0               # Lightness jitter width when filling after multiple seeds

# ==========================================
# Scale Generator
# ==========================================

SCALE_STEPS = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)
SCALE_BASE_CHROMA_MAX = 0.32       # Cap on the chroma taken from the input color
SCALE_L_TOP = 0.97                 # Lightness at t = 0
SCALE_L_BOTTOM = 0.10              # Lightness at t = 1 (before clamping)
SCALE_L_EXP = 0.85                 # Exponent of the lightness curve
SCALE_L_RANGE = (0.02, 0.98)       # Lightness clamp
SCALE_TENT_PEAK_T = 0.4            # Where the chroma scale factor peaks
SCALE_TENT_BOOST = 1.1             # Chroma scale factor at the peak
SCALE_TENT_FALLOFF = 0.3           # Chroma scale factor loss per unit distance from the peak

# ==========================================
# Utility Colors
# ==========================================

UTILITY_ROLES = ("info", "success", "warning", "error", "neutral", "focus")

# Role -> (label, description, anchor hue or None for palette-derived roles)
UTILITY_DEFS = {
    "info": ("Info", "Informational messages, tooltips, hints", 231.0),
    "success": ("Success", "Confirmations, completed states, positive actions", 142.0),
    "warning": ("Warning", "Cautions, pending states, non-critical alerts", 85.0),
    "error": ("Error", "Destructive actions, validation failures, danger", 25.0),
    "neutral": ("Neutral", "Disabled states, placeholders, secondary content", None),
    "focus": ("Focus", "Keyboard focus rings, matches primary palette color", None),
}

UTILITY_DEFAULT_AVG_L = 0.55       # Average lightness assumed for an empty palette
UTILITY_DEFAULT_AVG_C = 0.12       # Average chroma assumed for an empty palette
UTILITY_DEFAULT_PRIMARY = (0.55, 0.15, 230.0)  # OKLCH used when the palette is empty
UTILITY_TARGET_L = 0.55            # Nominal lightness for anchored roles
UTILITY_BRIGHT_AVG_L = 0.65        # Palettes above this average lightness count as bright
UTILITY_BRIGHT_TARGET_L = 0.52     # Target lightness for bright palettes
UTILITY_DARK_AVG_L = 0.35          # Palettes below this average lightness count as dark
UTILITY_DARK_TARGET_L = 0.58       # Target lightness for dark palettes
UTILITY_L_RANGE = (0.46, 0.62)     # Clamp for the target lightness
UTILITY_C_RANGE = (0.10, 0.22)     # Clamp for the target chroma
UTILITY_HUE_GAP = 18.0             # Minimum hue separation from palette colors (degrees)
UTILITY_FOCUS_L_RANGE = (0.55, 0.72)
UTILITY_FOCUS_C_RANGE = (0.12, 0.30)

# ==========================================
# Theme Tokens
# ==========================================

THEME_TINT_C_RANGE = (0.006, 0.016)        # Chroma of brand-tinted neutrals
THEME_NEUTRAL_L_RANGE = (0.01, 0.995)      # Lightness clamp for tinted neutrals
THEME_PRIMARY_LIGHT_L = (0.22, 0.38)       # Primary lightness band, light mode
THEME_PRIMARY_DARK_L = (0.60, 0.85)        # Primary lightness band, dark mode
THEME_SURFACE_LIGHT_L = (0.99, 0.972, 0.955, 0.935, 0.98)  # background, dim, card, raised, popover
THEME_SURFACE_DARK_LEVELS = (0, 1, 2, 3, 5)                # elevation levels for the same surfaces
THEME_PALETTE_SLOT_NAMES = ("primary", "secondary")

# Hue buckets for approximate color naming (upper bound exclusive)
HUE_NAME_BUCKETS = (
    (30.0, "red"),
    (60.0, "orange"),
    (110.0, "yellow"),
    (160.0, "green"),
    (220.0, "teal"),
    (270.0, "blue"),
    (310.0, "purple"),
    (340.0, "pink"),
)
GRAY_NAME_CHROMA = 0.04            # Below this chroma a color is named as a gray

# ==========================================
# Palette Scoring
# ==========================================

SCORE_SATURATION_WEIGHT = 1.5      # Score points lost per percent of saturation spread
SCORE_UNIQUENESS_SCALE = 500.0     # Multiplier from mean OKLab distance to score points

# ==========================================
# Image Extraction
# ==========================================

EXTRACT_MAX_SIDE = 200             # Longest image side after downscaling (px)
EXTRACT_MIN_ALPHA = 128            # Pixels more transparent than this are skipped
EXTRACT_DEFAULT_COUNT = 8          # Colors returned when no count is given
EXTRACT_MIN_SATURATION = 8.0       # Bucket averages below this HSL saturation are dropped
EXTRACT_L_RANGE = (10.0, 92.0)     # Usable HSL lightness band for bucket averages
EXTRACT_DEDUP_DIST = 0.08          # OKLab distance under which two colors count as duplicates
EXTRACT_EMPTY_BUCKET = (128, 128, 128)

# ==========================================
# Gradients
# ==========================================

GRADIENT_KINDS = ["linear", "radial", "conic"]
GRADIENT_SPACES = ["srgb", "oklab", "oklch"]  # CSS Color 4 interpolation spaces
GRADIENT_DEFAULT_DIRECTION = "to right"
GRADIENT_CONIC_DEFAULT = "from 0deg"
GRADIENT_PREVIEW_WIDTH = 48        # Terminal cells in the gradient preview bar

# ==========================================
# Application Logic & Constraints
# ==========================================

MAX_DEC = 16777215                 # Max integer value for 24-bit Hex (0xFFFFFF)
MAX_COUNT = 24                     # Maximum number of colors in a generated palette
MAX_STEPS = 100                    # Maximum number of mixing steps

# Keys used to extract and format technical color data
TECH_INFO_KEYS = [
    'rgb',
    'luminance',
    'hsl',
    'hsv',
    'cmyk',
    'oklab',
    'oklch',
    'contrast',
    'name',
]

MIX_SPACES = ["oklab", "hsl", "rgb"]

EXPORT_FORMAT_KEYS = ["css", "json", "tailwind", "tailwind4", "style-dictionary"]

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
