"""
Vocabulary catalog for the prompt builder.

Static registry of prompt categories, their options, and the lens and
camera-body collections. Everything here is immutable and loaded once at
import time; lookups return ``None`` for unknown ids and callers drop them.

Fragments (``prompt_value``) double as the parser's vocabulary, so within a
category no two options may share a fragment. ``find_fragment_collisions``
reports violations.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class Option:
    id: str
    label: str
    prompt_value: str
    group: Optional[str] = None
    tooltip: Optional[str] = None
    image: Optional[str] = None


@dataclass(frozen=True)
class Category:
    """Fields shared by every category kind."""

    id: str
    label: str
    description: str
    options: Tuple[Option, ...] = ()
    allow_custom: bool = False
    show_descriptions: bool = False
    custom_placeholder: Optional[str] = None
    hint_text: Optional[str] = None

    kind = "single"

    def option(self, option_id: str) -> Optional[Option]:
        for option in self.options:
            if option.id == option_id:
                return option
        return None

    def group_of(self, option_id: str) -> Optional[str]:
        option = self.option(option_id)
        return option.group if option else None


@dataclass(frozen=True)
class SingleSelectCategory(Category):
    kind = "single"


@dataclass(frozen=True)
class MultiSelectCategory(Category):
    kind = "multiple"


@dataclass(frozen=True)
class OnePerGroupCategory(Category):
    kind = "one_per_group"

    @property
    def groups(self) -> Tuple[str, ...]:
        seen: List[str] = []
        for option in self.options:
            if option.group and option.group not in seen:
                seen.append(option.group)
        return tuple(seen)

    def group_members(self, group: str) -> Tuple[str, ...]:
        return tuple(o.id for o in self.options if o.group == group)


@dataclass(frozen=True)
class FreeTextCategory(Category):
    kind = "free_text"

    default_custom_value: Optional[str] = None


class LensStyle(str, Enum):
    ANAMORPHIC = "A"
    SPHERICAL = "S"
    MACRO = "M"
    TELEPHOTO = "T"

    @property
    def label(self) -> str:
        return self.name.capitalize()


class CameraType(str, Enum):
    DIGITAL = "D"
    FILM = "F"

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Lens:
    id: str
    name: str
    image_path: str
    styles: Tuple[LensStyle, ...]
    prompt_value: str
    tooltip: Optional[str] = None


@dataclass(frozen=True)
class CameraBody:
    id: str
    name: str
    image_path: str
    camera_type: CameraType
    prompt_value: str
    tooltip: Optional[str] = None


LENS_STYLE_DESCRIPTIONS: Dict[LensStyle, str] = {
    LensStyle.ANAMORPHIC: "Cinematic wide aspect ratio look with oval bokeh",
    LensStyle.SPHERICAL: "Standard lens with natural circular bokeh",
    LensStyle.MACRO: "Extreme close-up detail and magnification",
    LensStyle.TELEPHOTO: "Long focal length for distant subjects",
}

CAMERA_TYPE_DESCRIPTIONS: Dict[CameraType, str] = {
    CameraType.DIGITAL: "Modern digital cinema cameras",
    CameraType.FILM: "Classic film cameras",
}


def _options(*rows: Tuple) -> Tuple[Option, ...]:
    return tuple(Option(*row) for row in rows)


def _grouped(group: str, *rows: Tuple[str, str, str]) -> Tuple[Option, ...]:
    return tuple(Option(id_, label, value, group) for id_, label, value in rows)


# ============================================================================
# OPTION LISTS
# ============================================================================

CAMERA_TYPES = _options(
    ("dslr", "DSLR", "professional DSLR camera"),
    ("mirrorless", "Mirrorless", "mirrorless camera"),
    ("medium-format", "Medium Format", "medium format camera"),
    ("large-format", "Large Format 4x5", "large format 4x5 camera"),
    ("hasselblad", "Hasselblad", "Hasselblad"),
    ("leica", "Leica", "Leica"),
    ("canon-5d", "Canon 5D Mark IV", "Canon 5D Mark IV"),
    ("sony-a7", "Sony A7R IV", "Sony A7R IV"),
    ("nikon-z9", "Nikon Z9", "Nikon Z9"),
    ("red-cinema", "RED Cinema Camera", "RED cinema camera"),
    ("arri-alexa", "ARRI Alexa", "ARRI Alexa"),
    ("polaroid", "Polaroid", "Polaroid instant photo"),
    ("disposable", "Disposable Camera", "disposable camera aesthetic"),
    ("iphone", "iPhone Pro", "iPhone Pro"),
)

GENRES = _options(
    ("cinematic", "Cinematic", "cinematic"),
    ("photorealistic", "Photorealistic", "photorealistic"),
    ("ultra-realistic", "Ultra-Realistic", "ultra-realistic"),
)

FILM_STOCKS = _options(
    ("kodak-portra-400", "Kodak Portra 400", "Kodak Portra 400 film"),
    ("kodak-portra-800", "Kodak Portra 800", "Kodak Portra 800 film"),
    ("kodak-ektar-100", "Kodak Ektar 100", "Kodak Ektar 100 film"),
    ("kodak-gold-200", "Kodak Gold 200", "Kodak Gold 200 film"),
    ("kodak-tri-x", "Kodak Tri-X 400", "Kodak Tri-X 400 black and white film"),
    ("fuji-pro-400h", "Fuji Pro 400H", "Fuji Pro 400H film"),
    ("fuji-superia", "Fuji Superia", "Fuji Superia film"),
    ("fuji-velvia", "Fuji Velvia 50", "Fuji Velvia 50 slide film"),
    ("ilford-hp5", "Ilford HP5 Plus", "Ilford HP5 Plus black and white film"),
    ("ilford-delta", "Ilford Delta 3200", "Ilford Delta 3200 high grain black and white film"),
    ("cinestill-800t", "CineStill 800T", "CineStill 800T tungsten film with halation"),
    ("cinestill-50d", "CineStill 50D", "CineStill 50D daylight film"),
    ("lomography", "Lomography", "Lomography film aesthetic with vignette and light leaks"),
)

# ISO 400 and ISO 1600 sit at group boundaries and are listed once each
ISO_SETTINGS = (
    _grouped(
        "Low (for bright scenes)",
        ("iso-100", "100", "ISO 100"),
        ("iso-200", "200", "ISO 200"),
        ("iso-300", "300", "ISO 300"),
    )
    + _grouped(
        "Medium (best for indoors)",
        ("iso-400", "400", "ISO 400"),
        ("iso-500", "500", "ISO 500"),
        ("iso-600", "600", "ISO 600"),
        ("iso-700", "700", "ISO 700"),
        ("iso-800", "800", "ISO 800"),
        ("iso-900", "900", "ISO 900"),
        ("iso-1000", "1000", "ISO 1000"),
        ("iso-1100", "1100", "ISO 1100"),
        ("iso-1200", "1200", "ISO 1200"),
        ("iso-1300", "1300", "ISO 1300"),
        ("iso-1400", "1400", "ISO 1400"),
        ("iso-1500", "1500", "ISO 1500"),
    )
    + _grouped(
        "High (special use settings)",
        ("iso-1600", "1600", "ISO 1600"),
        ("iso-1700", "1700", "ISO 1700"),
        ("iso-1800", "1800", "ISO 1800"),
        ("iso-1900", "1900", "ISO 1900"),
        ("iso-2000", "2000", "ISO 2000"),
    )
)

APERTURE_SETTINGS = _grouped(
    "Lower f-stop increases Depth of Field",
    ("f1.2", "f/1.2", "f/1.2 aperture"),
    ("f1.4", "f/1.4", "f/1.4 aperture"),
    ("f1.8", "f/1.8", "f/1.8 aperture"),
    ("f2.8", "f/2.8", "f/2.8 aperture"),
    ("f4", "f/4", "f/4 aperture"),
    ("f5.6", "f/5.6", "f/5.6 aperture"),
    ("f8", "f/8", "f/8 aperture"),
    ("f11", "f/11", "f/11 aperture"),
    ("f16", "f/16", "f/16 aperture"),
    ("f22", "f/22", "f/22 aperture"),
)

SHUTTER_SPEEDS = (
    _grouped(
        "Standard (Natural Look)",
        ("1-125", "1/125s", "1/125 shutter speed"),
        ("1-60", "1/60s", "1/60 shutter speed"),
        ("1-30", "1/30s", "1/30 shutter speed"),
    )
    + _grouped(
        "Slow (Long Exposure)",
        ("1-15", "1/15s", "1/15 shutter speed"),
        ("1-8", "1/8s", "1/8 shutter speed"),
        ("0.5s", "0.5s", "0.5 second exposure"),
        ("1s", "1s", "1 second exposure"),
        ("5s", "5s", "5 second exposure"),
    )
    + _grouped(
        "Fast (Freeze Motion)",
        ("1-250", "1/250s", "1/250 shutter speed"),
        ("1-500", "1/500s", "1/500 shutter speed"),
        ("1-1000", "1/1000s", "1/1000 shutter speed"),
        ("1-2000", "1/2000s", "1/2000 shutter speed"),
        ("1-4000", "1/4000s", "1/4000 shutter speed"),
    )
)

FRAMING_GROUP_ORDER: Tuple[str, ...] = ("Height", "View", "Size")

CAMERA_ANGLES = _options(
    ("height-eye", "Eye", "Eye-level", "Height", "Camera at eye level with subject"),
    ("height-high", "High", "High-angle", "Height", "Camera above subject looking down"),
    ("height-low", "Low", "Low-angle", "Height", "Camera below subject looking up"),
    ("height-worm", "Worm", "Worm's eye-view", "Height", "Extreme low angle from ground level"),
    ("height-top", "Top", "Top-down-view", "Height", "Camera directly above looking straight down"),
    ("height-aerial", "Aerial", "Aerial view", "Height", "High altitude from above"),
    ("view-front", "Front", "from the front", "View", "Subject facing directly at camera"),
    ("view-side", "Side", "from the side", "View", "Profile from the side"),
    ("view-three-quarter", "¾", "three quarters", "View", "Subject angled 45 degrees to camera"),
    ("view-ots", "OTS", "over-the-shoulder", "View", "Camera behind one person looking at another"),
    ("view-rear", "Rear", "from the rear", "View", "From behind the subject"),
    ("view-dutch", "Dutch", "Dutch angle", "View", "Camera tilted creating unease or tension"),
    ("size-xwide", "Xwide", "extreme wide shot,", "Size", "Vast scene where subject may be barely visible"),
    ("size-wide", "Wide", "wide shot,", "Size", "Full body visible with environment"),
    ("size-medium", "Medium", "medium shot,", "Size", "Subject from waist up"),
    ("size-close", "Close", "closeup shot,", "Size", "Face or specific detail fills frame"),
    ("size-xclose", "Xclose", "extreme closeup,", "Size", "Tight on specific detail like eyes"),
)

LENS_STYLE_OPTIONS = _options(
    ("spherical", "Spherical", "Spherical"),
    ("anamorphic", "Anamorphic", "Anamorphic"),
    ("vintage", "Vintage", "Vintage"),
)

LENS_TYPES = _options(
    ("fisheye", "8mm Fisheye", "on a 8mm fisheye lens"),
    ("ultrawide", "14mm Ultra Wide", "on a 14mm lens"),
    ("wide", "24mm Wide", "on a 24mm lens"),
    ("standard-35", "35mm Standard", "on a 35mm lens"),
    ("standard-50", "50mm Nifty Fifty", "on a 50mm lens"),
    ("portrait-85", "85mm Portrait", "on a 85mm lens"),
    ("portrait-105", "105mm Portrait", "on a 105mm lens"),
    ("tele-135", "135mm Telephoto", "on a 135mm lens"),
    ("tele-200", "200mm Telephoto", "on a 200mm lens"),
    ("super-tele", "400mm Super Telephoto", "on a 400mm lens"),
    ("macro", "100mm Macro", "on 100mm lens"),
)

WARDROBE_OPTIONS = _options(
    ("casual", "Casual", "wearing casual clothes"),
    ("formal", "Formal", "wearing formal attire"),
    ("business", "Business", "wearing business attire"),
    ("streetwear", "Streetwear", "wearing streetwear fashion"),
    ("vintage", "Vintage", "wearing vintage clothing"),
    ("bohemian", "Bohemian", "wearing bohemian style clothing"),
    ("minimalist", "Minimalist", "wearing minimalist clothing"),
    ("athletic", "Athletic", "wearing athletic wear"),
    ("haute-couture", "Haute Couture", "wearing haute couture designer fashion"),
    ("traditional", "Traditional", "wearing traditional cultural attire"),
    ("cyberpunk", "Cyberpunk", "wearing cyberpunk futuristic clothing"),
    ("fantasy", "Fantasy", "wearing fantasy costume"),
    ("uniform", "Uniform", "wearing a uniform"),
    ("layered", "Layered", "wearing layered clothing"),
)

ENVIRONMENTS = _options(
    ("studio", "Studio", "in a photography studio"),
    ("urban", "Urban Street", "on urban city street"),
    ("nature", "Nature", "in nature setting"),
    ("forest", "Forest", "in a dense forest"),
    ("beach", "Beach", "on a beach"),
    ("mountain", "Mountain", "in the mountains"),
    ("desert", "Desert", "in the desert"),
    ("industrial", "Industrial", "in industrial setting, abandoned warehouse"),
    ("rooftop", "Rooftop", "on a rooftop"),
    ("cafe", "Café", "in a cozy café"),
    ("office", "Office", "in a modern office"),
    ("home", "Home Interior", "in a home interior"),
    ("garden", "Garden", "in a lush garden"),
    ("underwater", "Underwater", "underwater"),
    ("space", "Space", "in outer space"),
    ("neon-city", "Neon City", "in neon-lit city at night"),
    ("rain", "Rain", "in the rain"),
    ("snow", "Snow", "in snowy landscape"),
)

LIGHTING_OPTIONS = _options(
    (
        "dramatic-rim", "Dramatic Rim",
        "rim lighting emphasizing the edges of the subject", None,
        "Positions a light behind or beside the subject to produce a halo or outline "
        "that separates the silhouette from the background.",
        "/rim.png",
    ),
    (
        "soft-studio", "Soft Studio",
        "softstudio lighting creating gentle transitions between light and shadow", None,
        "Gentle transitions between light and shadow that minimise harsh highlights; "
        "flattering for portraits.",
        "/softstudio.png",
    ),
    (
        "cinematic", "Cinematic",
        "cinematic lighting creating mood depth and focus", None,
        "Film-style lighting used to build mood, depth and atmosphere and to guide attention.",
        "/cinematic.png",
    ),
    (
        "low-key", "Low-key",
        "low key lighting producing high contrast between light and shadow", None,
        "Dramatic high-contrast look dominated by dark tones, usually a single key light "
        "with little fill.",
        "/lowkey.png",
    ),
    (
        "directional", "Directional",
        "highlight the subject with directional lighting", None,
        "Concentrated light aimed in one direction to pick out a subject or area.",
        "/directional.png",
    ),
    (
        "balanced", "Balanced",
        "balanced lighting creating a harmonious and visually appealing environment", None,
        "Several sources combined so that no area dominates.",
        "/balanced.png",
    ),
    (
        "backlight", "Backlight",
        "backlight lighting creating a halo or outline effect", None,
        "Light placed behind the subject facing the camera, producing a glowing outline.",
        "/backlight.png",
    ),
    (
        "bokeh", "Bokeh Light Effects",
        "bokeh lighting using quality blurs to enhance the subject", None,
        "Emphasises the quality of out-of-focus highlights behind the subject.",
        "/bokeh.png",
    ),
    (
        "colored-gel", "Colored Gel",
        "gel lighting creating mood", None,
        "Coloured filters in front of the source shift the light colour to set a mood.",
        "/gel.png",
    ),
    (
        "rembrandt", "Rembrandt",
        "High-contrast Rembrandt lighting", None,
        "Portrait setup leaving a small triangle of light on the shadow side of the face.",
        "/rembrandt.png",
    ),
    (
        "contre-jour", "Contre-Jour",
        "contre-jour lighting creating a back light effect", None,
        "Camera pointed toward the light source for a strong backlit effect.",
        "/contre-jour.png",
    ),
)

FINAL_TOUCHES = _options(
    ("high-detail", "High Detail", "highly detailed, sharp focus"),
    ("cinematic", "Cinematic", "cinematic look, movie still"),
    ("editorial", "Editorial", "editorial photography, magazine quality"),
    ("documentary", "Documentary", "documentary style, candid"),
    ("fine-art", "Fine Art", "fine art photography"),
    ("moody", "Moody", "moody atmosphere, dark tones"),
    ("dreamy", "Dreamy", "dreamy soft aesthetic"),
    ("gritty", "Gritty", "gritty raw aesthetic"),
    ("clean", "Clean", "clean crisp aesthetic"),
    ("vintage-look", "Vintage Look", "vintage aesthetic, retro color grading"),
    ("desaturated", "Desaturated", "desaturated muted colors"),
    ("vibrant", "Vibrant", "vibrant saturated colors"),
    ("contrasty", "High Contrast", "high contrast"),
    ("soft-contrast", "Soft Contrast", "soft low contrast"),
    ("film-grain", "Film Grain", "visible film grain"),
    ("noise-free", "Noise Free", "clean noise-free image"),
    ("vignette", "Vignette", "subtle vignette"),
    ("light-leaks", "Light Leaks", "light leaks and flares"),
    ("award-winning", "Award Winning", "award winning photography"),
    ("8k", "8K Resolution", "8K resolution, ultra high definition"),
)

DEFAULT_NEGATIVE_PROMPT = (
    "[Consistency] Maintain consistent lighting direction, facial proportions, "
    "and wardrobe across generations.\n\n"
    "[Negative] No extra limbs, no distorted hands, no plastic or waxy skin, "
    "no blown highlights, no CGI look, no modern LED lighting, no fantasy elements. "
    "Avoid perfectly symmetrical facial features, Natural human facial asymmetry, "
    "No over-smoothed skin, no visible AI artifacts, no text or watermarks"
)


# ============================================================================
# CATEGORIES
# ============================================================================

CATEGORIES: Tuple[Category, ...] = (
    MultiSelectCategory("style", "Genre", "Visual style of the image", GENRES),
    SingleSelectCategory("camera", "Type", "Type of camera used", CAMERA_TYPES, allow_custom=True),
    OnePerGroupCategory("angles", "Framing", "Shot types and camera angles", CAMERA_ANGLES),
    SingleSelectCategory("lensStyle", "Lens Style", "Spherical, Anamorphic, or Vintage", LENS_STYLE_OPTIONS),
    SingleSelectCategory("lens", "Lens", "Focal length and lens type", LENS_TYPES),
    SingleSelectCategory("filmStock", "Film Stock", "Film emulation or digital", FILM_STOCKS),
    SingleSelectCategory("iso", "ISO", "Sensitivity and grain", ISO_SETTINGS),
    SingleSelectCategory("aperture", "Aperture", "Depth of field control", APERTURE_SETTINGS),
    SingleSelectCategory("shutter", "Shutter Speed", "Motion and exposure time", SHUTTER_SPEEDS),
    FreeTextCategory(
        "action",
        "Subject(s) / Action(s)",
        "Define who is in the shot and what they are doing",
        (),
        allow_custom=True,
        custom_placeholder="WHO is doing WHAT...describe their actions",
        hint_text="Only mention what is actually visible in the shot.",
    ),
    FreeTextCategory(
        "wardrobe",
        "Wardrobe",
        "Clothing and attire",
        WARDROBE_OPTIONS,
        allow_custom=True,
        custom_placeholder="Describe clothing and attire...",
        hint_text="Be sure to only mention what will be seen in the shot",
    ),
    FreeTextCategory(
        "environment",
        "Environment",
        "Location and setting",
        ENVIRONMENTS,
        allow_custom=True,
        custom_placeholder="Describe the location and setting and don't forget 'Volumetric Haze'",
    ),
    SingleSelectCategory(
        "lighting", "Lighting", "Light source and style", LIGHTING_OPTIONS, show_descriptions=True
    ),
    FreeTextCategory(
        "finalTouches",
        "Negative Prompts",
        "Instructions of what to AVOID and ENSURE",
        FINAL_TOUCHES,
        allow_custom=True,
        custom_placeholder="Add additional negative prompts...",
        default_custom_value=DEFAULT_NEGATIVE_PROMPT,
    ),
)

_CATEGORIES_BY_ID: Dict[str, Category] = {c.id: c for c in CATEGORIES}


# ============================================================================
# LENSES AND CAMERA BODIES
# ============================================================================

_A = (LensStyle.ANAMORPHIC,)
_S = (LensStyle.SPHERICAL,)
_AS = (LensStyle.ANAMORPHIC, LensStyle.SPHERICAL)
_M = (LensStyle.MACRO,)
_T = (LensStyle.TELEPHOTO,)

LENSES: Tuple[Lens, ...] = (
    Lens("20mm-a", "20mm Anamorphic", "/lenses/20mm-a.png", _A, "20mm anamorphic lens", "Ultra wide anamorphic for dramatic perspectives"),
    Lens("40mm-a", "40mm Anamorphic", "/lenses/40mm-a.png", _A, "40mm anamorphic lens", "Classic anamorphic standard focal length"),
    Lens("50mm-a", "50mm Anamorphic", "/lenses/50mm-a.png", _A, "50mm anamorphic lens", "Versatile anamorphic with natural field of view"),
    Lens("75mm-a", "75mm Anamorphic", "/lenses/75mm-a.png", _A, "75mm anamorphic lens", "Portrait-friendly anamorphic focal length"),
    Lens("85mm-a", "85mm Anamorphic", "/lenses/85mm-a.png", _A, "85mm anamorphic lens", "Classic portrait anamorphic"),
    Lens("100mm-a", "100mm Anamorphic", "/lenses/100mm-a.png", _A, "100mm anamorphic lens", "Tight anamorphic for compressed backgrounds"),
    Lens("135mm-a", "135mm Anamorphic", "/lenses/135mm-a.png", _A, "135mm anamorphic lens", "Telephoto anamorphic for cinematic compression"),
    Lens("150mm-a", "150mm Anamorphic", "/lenses/150mm-a.png", _A, "150mm anamorphic lens", "Long anamorphic for dramatic isolation"),
    Lens("200mm-a", "200mm Anamorphic", "/lenses/200mm-a.png", _A, "200mm anamorphic lens", "Super telephoto anamorphic"),
    Lens("35mm-s", "35mm Standard", "/lenses/35mmstandard-s.png", _S, "35mm spherical lens", "Classic standard spherical lens"),
    Lens("50mm-s", "50mm Spherical", "/lenses/50mm-s.png", _S, "50mm spherical lens", "Nifty fifty - versatile standard lens"),
    Lens("6mm-fisheye", "6mm Fisheye", "/lenses/6mmfisheye-as.png", _AS, "6mm fisheye lens", "Extreme fisheye for creative distortion"),
    Lens("8mm-fisheye", "8mm Fisheye", "/lenses/8mmfisheye-as.png", _AS, "8mm fisheye lens", "Wide fisheye with barrel distortion"),
    Lens("14mm-ultrawide", "14mm Ultra Wide", "/lenses/14mmultrawide-as.png", _AS, "14mm ultra wide lens", "Ultra wide angle for expansive scenes"),
    Lens("35mm-m", "35mm Macro", "/lenses/35mm-m.png", _M, "35mm macro lens", "Wide angle macro for environmental close-ups"),
    Lens("60mm-m", "60mm Macro", "/lenses/60mm-m.png", _M, "60mm macro lens", "Standard macro for detailed close-ups"),
    Lens("100mm-m", "100mm Macro", "/lenses/100mm-m.png", _M, "100mm macro lens", "Classic macro for 1:1 reproduction"),
    Lens("150mm-m", "150mm Macro", "/lenses/150mm-m.png", _M, "150mm macro lens", "Long macro for working distance"),
    Lens("400mm-t", "400mm Telephoto", "/lenses/400mm-t.png", _T, "400mm super telephoto lens", "Super telephoto for wildlife and sports"),
)

_D = CameraType.DIGITAL
_F = CameraType.FILM

CAMERA_BODIES: Tuple[CameraBody, ...] = (
    CameraBody("arri-alexa", "ARRI Alexa", "/cameras/Arri_Alexa_D.png", _D, "shot on ARRI Alexa", "Industry standard digital cinema camera with natural color science"),
    CameraBody("canon-mark-iv", "Canon Mark IV", "/cameras/CanonMark_IV_D.png", _D, "shot on Canon EOS 5D Mark IV", "Popular DSLR for hybrid photo/video work"),
    CameraBody("canon-c300-iii", "Canon C300 III", "/cameras/Canon_EOS_C300_Mark_III_D.png", _D, "shot on Canon EOS C300 Mark III", "Professional cinema camera with Dual Gain Output"),
    CameraBody("imax", "IMAX", "/cameras/IMAX_D.png", _D, "shot on IMAX camera", "Large format cinema for maximum resolution and immersion"),
    CameraBody("red", "RED", "/cameras/RED_D.png", _D, "shot on RED camera", "High resolution digital cinema with RAW recording"),
    CameraBody("sony-fx9", "Sony FX9", "/cameras/sony-fx9_D.png", _D, "shot on Sony FX9", "Full-frame cinema camera with fast autofocus"),
    CameraBody("sony-venice", "Sony Venice", "/cameras/Sony_Venice_D.png", _D, "shot on Sony Venice", "High-end cinema camera with beautiful color reproduction"),
    CameraBody("ursa-mini-pro", "URSA Mini Pro 4.6K", "/cameras/URSA-Mini-Pro-4.6K_D.png", _D, "shot on Blackmagic URSA Mini Pro 4.6K", "Versatile cinema camera with built-in ND filters"),
    CameraBody("arriflex-16sr", "Arriflex 16SR", "/cameras/Arriflex_16SR_F.png", _F, "shot on Arriflex 16SR", "Classic Super 16mm film camera for documentary and indie films"),
    CameraBody("panaflex-millennium", "Panaflex Millennium", "/cameras/Panaflex_Millenium_F.png", _F, "shot on Panaflex Millennium", "Legendary 35mm film camera used on countless features"),
    CameraBody("panavision-panaflex", "Panavision Panaflex", "/cameras/Panavision_Panaflex_F.png", _F, "shot on Panavision Panaflex", "Iconic Hollywood film camera with distinctive look"),
)

DEFAULT_CAMERA_ID = "canon-c300-iii"

_LENSES_BY_ID: Dict[str, Lens] = {lens.id: lens for lens in LENSES}
_CAMERAS_BY_ID: Dict[str, CameraBody] = {camera.id: camera for camera in CAMERA_BODIES}


# ============================================================================
# LOOKUPS
# ============================================================================

def all_categories() -> Tuple[Category, ...]:
    """Return every category in catalog order."""
    return CATEGORIES


def category_by_id(category_id: str) -> Optional[Category]:
    return _CATEGORIES_BY_ID.get(category_id)


def find_option(category_id: str, option_id: str) -> Optional[Option]:
    """
    Look up an option inside a category.

    Args:
        category_id: Category identifier (e.g. "angles", "lighting")
        option_id: Option identifier within that category

    Returns:
        The option, or None when either id is unknown
    """
    category = _CATEGORIES_BY_ID.get(category_id)
    if category is None:
        return None
    return category.option(option_id)


def find_lens(lens_id: Optional[str]) -> Optional[Lens]:
    if not lens_id:
        return None
    return _LENSES_BY_ID.get(lens_id)


def find_camera(camera_id: Optional[str]) -> Optional[CameraBody]:
    if not camera_id:
        return None
    return _CAMERAS_BY_ID.get(camera_id)


def parse_lens_style(value: Optional[str]) -> Optional[LensStyle]:
    """Accept a style code ("A") or label ("anamorphic"); None when unknown."""
    if not value:
        return None
    normalized = value.strip()
    for style in LensStyle:
        if normalized == style.value or normalized.lower() == style.label.lower():
            return style
    return None


def parse_camera_type(value: Optional[str]) -> Optional[CameraType]:
    if not value:
        return None
    normalized = value.strip()
    for camera_type in CameraType:
        if normalized == camera_type.value or normalized.lower() == camera_type.label.lower():
            return camera_type
    return None


def lens_style_label(style_id: Optional[str]) -> str:
    style = parse_lens_style(style_id)
    return style.label if style else ""


def lenses_for_style(style: Optional[LensStyle]) -> List[Lens]:
    """Lenses listed under a style filter; all lenses when no filter is given."""
    if style is None:
        return list(LENSES)
    return [lens for lens in LENSES if style in lens.styles]


def cameras_for_type(camera_type: Optional[CameraType]) -> List[CameraBody]:
    if camera_type is None:
        return list(CAMERA_BODIES)
    return [camera for camera in CAMERA_BODIES if camera.camera_type == camera_type]


def find_fragment_collisions(categories: Iterable[Category] = CATEGORIES) -> List[Tuple[str, str, str]]:
    """
    Report options whose fragments are indistinguishable inside one category.

    Returns:
        List of (category_id, option_id, other_option_id) where both options
        render the same fragment (case-insensitive)
    """
    collisions: List[Tuple[str, str, str]] = []
    for category in categories:
        seen: Dict[str, str] = {}
        for option in category.options:
            key = option.prompt_value.strip().lower()
            if key in seen:
                collisions.append((category.id, seen[key], option.id))
            else:
                seen[key] = option.id
    return collisions
