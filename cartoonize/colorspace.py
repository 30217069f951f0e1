"""sRGB <-> CIE L*a*b* (D65) conversion.

Both directions accept any array whose last axis holds the three channels,
so a single pixel of shape (3,) works as well as a flat (N, 3) pixel list.
"""

import numpy as np

# sRGB (D65) primaries
RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041]
])
XYZ_TO_RGB = np.array([
    [ 3.2404542, -1.5371385, -0.4985314],
    [-0.9692660,  1.8760108,  0.0415560],
    [ 0.0556434, -0.2040259,  1.0572252]
])
WHITE_D65 = np.array([0.95047, 1.0, 1.08883])

EPSILON = 216 / 24389
KAPPA = 24389 / 27


def srgb_to_linear(rgb: np.ndarray) -> np.ndarray:
    """Undo sRGB companding. Input is 8-bit, output is linear in [0, 1]."""
    rgb_norm = np.asarray(rgb, dtype=np.float64) / 255.0
    mask = rgb_norm > 0.04045
    return np.where(mask, ((rgb_norm + 0.055) / 1.055) ** 2.4, rgb_norm / 12.92)


def linear_to_srgb(rgb_linear: np.ndarray) -> np.ndarray:
    """Apply sRGB companding and quantize to uint8.

    Out-of-gamut channels are clamped to [0, 1] first. Quantization rounds
    half up: floor(v * 255 + 0.5).
    """
    rgb_linear = np.clip(rgb_linear, 0.0, 1.0)
    mask = rgb_linear > 0.0031308
    # the masked-out branch is still evaluated, keep the power base positive
    safe = np.where(mask, rgb_linear, 1.0)
    rgb = np.where(mask, 1.055 * (safe ** (1 / 2.4)) - 0.055, 12.92 * rgb_linear)
    return np.clip(np.floor(rgb * 255.0 + 0.5), 0, 255).astype(np.uint8)


def rgb_to_lab(rgb: np.ndarray) -> np.ndarray:
    """Convert 8-bit sRGB to LAB."""
    xyz = srgb_to_linear(rgb) @ RGB_TO_XYZ.T
    xyz_norm = xyz / WHITE_D65

    mask = xyz_norm > EPSILON
    f = np.where(mask, np.cbrt(xyz_norm), (KAPPA * xyz_norm + 16) / 116)

    L = 116 * f[..., 1] - 16
    a = 500 * (f[..., 0] - f[..., 1])
    b = 200 * (f[..., 1] - f[..., 2])

    return np.stack([L, a, b], axis=-1)


def lab_to_rgb(lab: np.ndarray) -> np.ndarray:
    """Convert LAB to 8-bit sRGB, clamping colors outside the sRGB gamut."""
    lab = np.asarray(lab, dtype=np.float64)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]

    fy = (L + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200

    xyz = np.empty_like(lab)
    xyz[..., 0] = np.where(fx ** 3 > EPSILON, fx ** 3, (116 * fx - 16) / KAPPA)
    xyz[..., 1] = np.where(L > KAPPA * EPSILON, fy ** 3, L / KAPPA)
    xyz[..., 2] = np.where(fz ** 3 > EPSILON, fz ** 3, (116 * fz - 16) / KAPPA)
    xyz = xyz * WHITE_D65

    return linear_to_srgb(xyz @ XYZ_TO_RGB.T)
