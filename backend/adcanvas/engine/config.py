"""Every tunable threshold of the layout engine in one place."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class LayoutConfig:
    """Thresholds shared by the synthesizer, auditor, fixer and reconciliation policy."""

    # Safe area margin as a fraction of min(width, height)
    safe_margin_frac: float = 0.06

    # Hard floor for every node
    min_node_width: float = 30.0
    min_node_height: float = 20.0

    # Side-by-side layouts: image column and gutter, fractions of safe width
    image_column_frac: float = 0.40
    gutter_frac: float = 0.05
    # Stacked layout: single centered column, fraction of safe width
    stack_column_frac: float = 0.90
    # Brand tag / CTA button height, fraction of safe height
    tag_height_frac: float = 0.07

    # Aspect change beyond this factor (either direction) triggers resynthesis.
    # Empirical; the lower bound is 1 / aspect_change_threshold (≈0.74).
    aspect_change_threshold: float = 1.35

    # Layout inference: packshot center left of this fraction → left-packshot,
    # right of 1 - this fraction → right-packshot, otherwise center.
    inference_band_frac: float = 1 / 3

    # Text fit: geometric shrink per attempt and attempt cap (empirical)
    text_shrink_factor: float = 0.92
    text_fit_max_attempts: int = 28
    default_line_height: float = 1.08
    # Boxes narrower/shorter than this are measured at this size
    min_measure_box: float = 10.0

    # Non-required elements dragged by the user keep this much on canvas
    drag_visible_margin: float = 10.0

    # "Product-forward" suggestion grows the packshot by this factor
    product_grow_factor: float = 1.08

    # Overlap notes: intersection / smaller area above this is reported
    overlap_note_threshold: float = 0.15

    # Float tolerance for containment checks
    containment_tolerance: float = 1e-6

    @property
    def aspect_change_lower(self) -> float:
        return 1.0 / self.aspect_change_threshold
