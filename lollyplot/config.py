"""
LollyPlot Configuration
Layout geometry, styling and output settings for lollipop diagrams

A PlotConfig is built once per render and only read afterwards.
"""
from dataclasses import dataclass, field


@dataclass
class LayoutConfig:
    """
    Geometry of the diagram bands and layout toggles

    All distances are in pixels.
    """

    # ============================================================
    # CANVAS
    # ============================================================
    graphic_width: float = 0.0
    """Total diagram width (px). 0 selects the width automatically"""

    min_auto_width: float = 400.0
    """Starting width for automatic sizing, before padding (px)"""

    max_auto_width: float = 4000.0
    """Upper bound for automatic sizing, before padding (px)"""

    padding: float = 15.0
    """Outer padding around the diagram (px)"""

    # ============================================================
    # BANDS
    # ============================================================
    backbone_height: float = 14.0
    """Height of the sequence backbone bar (px)"""

    domain_height: float = 24.0
    """Height of curated domain boxes (px)"""

    motif_height: float = 18.0
    """Height of motif boxes (px)"""

    axis_padding: float = 10.0
    """Gap between the domain row and the axis line (px)"""

    axis_height: float = 15.0
    """Height of the axis band including tick labels (px)"""

    # ============================================================
    # LOLLIPOPS
    # ============================================================
    lollipop_radius: float = 4.0
    """Radius of a lollipop head for a single mutation (px)"""

    lollipop_height: float = 28.0
    """Stem height below the lollipop head (px)"""

    stagger_gap: float = 2.0
    """Extra horizontal clearance added to the radius when testing closeness (px)"""

    label_rotation: float = -30.0
    """Rotation of lollipop labels (degrees, SVG convention)"""

    # ============================================================
    # TEXT AND TICKS
    # ============================================================
    text_padding: float = 5.0
    """Horizontal padding reserved inside domain boxes for labels (px)"""

    min_label_box_width: float = 10.0
    """Domain boxes narrower than this get no label (px)"""

    min_truncate_width: float = 40.0
    """Character truncation is only attempted above this available width (px)"""

    axis_tick_spacing: float = 20.0
    """Minimum horizontal distance between axis ticks (px)"""

    # ============================================================
    # TOGGLES
    # ============================================================
    show_labels: bool = False
    """Draw mutation labels above the lollipops"""

    hide_axis: bool = False
    """Skip the coordinate axis band"""

    hide_motifs: bool = False
    """Skip motif boxes (transmembrane, coiled-coil, disorder, ...)"""

    hide_disordered: bool = False
    """Skip disordered-region motifs only"""

    solid_fill_only: bool = False
    """Use a flat translucent fill instead of the hatch pattern"""

    @property
    def base_stem_height(self) -> float:
        """Height of a single, unstaggered lollipop (px)"""
        return self.lollipop_radius + self.lollipop_height


@dataclass
class StyleConfig:
    """
    Colors and fonts

    Colors are CSS hex strings.
    """

    # ============================================================
    # MUTATION COLORS
    # ============================================================
    mutation_color: str = "#ff0000"
    """Default head color for missense/nonsense changes"""

    synonymous_color: str = "#0000ff"
    """Default head color for synonymous or unflagged changes"""

    # ============================================================
    # TRACK COLORS
    # ============================================================
    backbone_color: str = "#BABDB6"
    """Fill of the backbone bar and lollipop stems"""

    axis_color: str = "#AAAAAA"
    """Stroke of the axis line and ticks"""

    lollipop_label_color: str = "#555"
    """Fill of lollipop label text"""

    domain_label_color: str = "#ffffff"
    """Fill of domain label text"""

    axis_label_color: str = "#000000"
    """Fill of axis tick labels"""

    stem_width: float = 2.0
    """Stroke width of lollipop stems (px)"""

    # ============================================================
    # FONTS
    # ============================================================
    font_family: str = "sans-serif"
    """Font family used for every text element"""

    domain_font_size: float = 12.0
    """Font size of domain labels (px)"""

    lollipop_font_size: float = 10.0
    """Font size of lollipop labels (px)"""

    axis_font_size: float = 10.0
    """Font size of axis tick labels (px)"""

    # ============================================================
    # LINKS
    # ============================================================
    link_prefix: str = "http://pfam.xfam.org"
    """Prefix joined to relative region links"""


@dataclass
class PlotConfig:
    """
    Complete plot configuration
    """

    # ============================================================
    # SUB-CONFIGURATIONS
    # ============================================================
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    """Layout configuration"""

    style: StyleConfig = field(default_factory=StyleConfig)
    """Style configuration"""

    # ============================================================
    # OUTPUT
    # ============================================================
    dpi: int = 96
    """Resolution used when rasterising to PNG/PDF"""

    # ============================================================
    # PRESET CONFIGURATIONS
    # ============================================================

    @classmethod
    def publication(cls) -> 'PlotConfig':
        """
        Settings for print figures

        - 300 DPI raster output
        - Taller domain band and larger lollipop heads
        - Solid fills (hatch patterns print poorly)

        Example:
            >>> config = PlotConfig.publication()
            >>> pipeline = RenderPipeline(config)
        """
        config = cls()
        config.dpi = 300
        config.layout.domain_height = 28.0
        config.layout.backbone_height = 16.0
        config.layout.lollipop_radius = 5.0
        config.layout.solid_fill_only = True
        return config

    @classmethod
    def compact(cls) -> 'PlotConfig':
        """
        Compact settings for dense mutation sets

        - Shorter stems and smaller heads
        - Reduced padding

        Example:
            >>> config = PlotConfig.compact()
        """
        config = cls()
        config.layout.padding = 8.0
        config.layout.lollipop_radius = 3.0
        config.layout.lollipop_height = 18.0
        config.layout.axis_padding = 6.0
        return config

    @classmethod
    def labeled(cls) -> 'PlotConfig':
        """
        Default geometry with mutation labels switched on

        Example:
            >>> config = PlotConfig.labeled()
        """
        config = cls()
        config.layout.show_labels = True
        return config

    @classmethod
    def preset(cls, name: str) -> 'PlotConfig':
        """Build a configuration from a preset name ('default' for none)"""
        presets = {
            'default': cls,
            'publication': cls.publication,
            'compact': cls.compact,
            'labeled': cls.labeled,
        }
        if name not in presets:
            raise ValueError(f"Unknown preset: {name}. Use one of {', '.join(presets)}")
        return presets[name]()
