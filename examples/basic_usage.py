"""Basic tincture usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from tincture import (
    RGB,
    OKLCH,
    linear,
    parse,
)


def demonstrate_colors() -> None:
    # Parse any notation, then move between spaces.
    accent = parse("#ff8040")
    print("Parsed:", repr(accent))
    print("As HSL:", accent.to_hsl())
    print("As OKLCH:", accent.to_oklch())

    # Mixing and contrast.
    print("Blend with navy:", accent.blend("navy", 0.3).to_hex())
    print("Contrast against white:", round(accent.contrast_ratio("white"), 2))
    readable = accent.adjust_for_contrast("white")
    print("Readable on white:", readable.to_hex())

    # Stable colors from strings.
    for user in ("alice", "bob", "carol"):
        print(f"{user}:", RGB.from_string(user).to_hex(), OKLCH.from_string(user).to_css_vars())


def demonstrate_gradients() -> None:
    strip = linear("to right", "red", "blue").rasterize(width=5)
    print("RGB gradient:", [c.to_hex() for c in strip])

    # Hue-aware interpolation takes the shorter way round the wheel.
    ring = linear("to right", "hsl(120, 100%, 50%)", "hsl(300, 100%, 50%)").rasterize(width=5)
    print("HSL gradient:", [c.to_css() for c in ring])

    grid = linear("to bottom right", ("black", 0.0), "tomato", ("white", 1.0)).rasterize(width=4, height=4)
    print("2D gradient shape:", grid.to_array().shape)


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_gradients()
