# Normalized RGB -> HSB pairs, hue as a fraction of a full turn
samples_rgb_hsb = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0),
    (0.0, 1.0, 0.0): (1/3, 1.0, 1.0),
    (0.0, 0.0, 1.0): (2/3, 1.0, 1.0),
    (1.0, 1.0, 0.0): (1/6, 1.0, 1.0),
    (0.0, 1.0, 1.0): (0.5, 1.0, 1.0),
    (1.0, 0.0, 1.0): (5/6, 1.0, 1.0),
    (1.0, 0.5, 0.0): (1/12, 1.0, 1.0),
    (1.0, 0.0, 0.5): (11/12, 1.0, 1.0),
    (0.5, 0.25, 0.25): (0.0, 0.5, 0.5),
    (0.2, 0.4, 0.8): (11/18, 0.75, 0.8),
}

# Achromatic colors: saturation 0, hue reported as 0
samples_gray_hsb = {
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
}

samples_hsb_rgb = {hsb: rgb for rgb, hsb in samples_rgb_hsb.items()}

# Packed ARGB integers and their channel bytes
samples_uint_argb = {
    0xAABBCCDD: (0xAA, 0xBB, 0xCC, 0xDD),
    0x00010001: (0x00, 0x01, 0x00, 0x01),
    0xFFFFFFFF: (0xFF, 0xFF, 0xFF, 0xFF),
    0x00000000: (0x00, 0x00, 0x00, 0x00),
    0x80FF0000: (0x80, 0xFF, 0x00, 0x00),
    0x7F3366CC: (0x7F, 0x33, 0x66, 0xCC),
}
