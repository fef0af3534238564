import numpy as np
from numpy import ndarray as NDArray


## HSL to RGB conversions

def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#Converting_to_RGB

    Args:
        h: array-like or scalar, hue in degrees [0, 360)
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float) % 360
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    m1 = l + s * np.where(l < 0.5, l, 1 - l)
    m2 = m1 - (m1 - l) * 2 * np.abs(((h / 60) % 2) - 1)
    low = 2 * l - m1

    # hue section picks which channel gets the max (m1), the ramp (m2) and the min
    section = np.clip(np.floor(h / 60).astype(int), 0, 5)
    r = np.choose(section, [m1, m2, low, low, m2, m1])
    g = np.choose(section, [m2, m1, m1, m2, low, low])
    b = np.choose(section, [low, low, m2, m1, m1, m2])

    return np.stack([r, g, b], axis=-1)


## RGB to HSL conversions

def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    # achromatic: saturation 0, hue 0
    chromatic = delta > 0
    saturation = np.zeros(out_shape)
    denom = 1 - np.abs(2 * lightness - 1)
    valid = chromatic & (denom > 0)
    saturation[valid] = delta[valid] / denom[valid]

    hue = np.zeros(out_shape)
    mask_r = chromatic & (max_c == r)
    mask_g = chromatic & (max_c == g) & ~mask_r
    mask_b = chromatic & ~mask_r & ~mask_g

    hue[mask_r] = ((g[mask_r] - b[mask_r]) / delta[mask_r]) % 6
    hue[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2
    hue[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4
    hue = (hue * 60) % 360

    return np.stack([hue, np.clip(saturation, 0.0, 1.0), lightness], axis=-1)
