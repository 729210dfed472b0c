"""
Compositor for Pixel Motion

Flattens the visible layers of one timeline slot into a single image:

1. Start from a transparent buffer
2. Onion skin (optional): previous slot of every visible layer, faded
3. Current slot of every visible layer, bottom to top, source-over

All blending happens directly on one accumulation bytearray. Layer
buffers are only ever read.

"""

from .errors import OutOfRange
from .pixel_buffer import PixelBuffer


def _blend_over(dst: bytearray, src, opacity: float = 1.0):
    """
    Source-over blend src onto dst in place (straight alpha)

        out_a = sa + da * (1 - sa)
        out_c = (sc * sa + dc * da * (1 - sa)) / out_a

    opacity scales every source alpha, which is how the onion skin fades.
    """
    for i in range(0, len(src), 4):
        src_alpha = src[i + 3]
        if src_alpha == 0:
            continue

        sa = (src_alpha / 255.0) * opacity
        if sa >= 1.0:
            dst[i:i + 4] = src[i:i + 4]
            continue

        da = dst[i + 3] / 255.0
        dst_weight = da * (1.0 - sa)
        out_a = sa + dst_weight
        if out_a <= 0.0:
            continue

        for c in range(3):
            value = (src[i + c] * sa + dst[i + c] * dst_weight) / out_a
            dst[i + c] = min(255, int(value + 0.5))
        dst[i + 3] = min(255, int(out_a * 255.0 + 0.5))


def composite(document, frame_index: int, onion_skin_enabled: bool = False,
              onion_skin_opacity: float = 0.3) -> PixelBuffer:
    """
    Render one timeline slot of the document

    Args:
        document: The Document to read from (never modified)
        frame_index: Timeline slot to render
        onion_skin_enabled: Show the previous slot underneath as a ghost
        onion_skin_opacity: Ghost strength, 0.0 to 1.0

    Returns:
        PixelBuffer: A new buffer holding the flattened image
    """
    if not 0 <= frame_index < document.frame_count:
        raise OutOfRange(f"Frame {frame_index} outside 0..{document.frame_count - 1}")

    output = PixelBuffer(document.width, document.height)
    visible = [layer for layer in document.layers if layer.visible]

    # === Onion Skin (must go first so the current frame covers it) === #
    if onion_skin_enabled and frame_index > 0 and onion_skin_opacity > 0:
        for layer in visible:
            _blend_over(output.data, layer.frames[frame_index - 1].data, onion_skin_opacity)

    # === Current Frame === #
    for layer in visible:
        _blend_over(output.data, layer.frames[frame_index].data)

    return output


def downscale_preview(buffer: PixelBuffer, target_size) -> PixelBuffer:
    """
    Nearest-neighbor resize for thumbnails

    Args:
        buffer: Source image
        target_size: int for a square result, or (width, height)

    No interpolation: every output pixel is a copy of exactly one source
    pixel, so pixel edges stay hard at any size.
    """
    if isinstance(target_size, int):
        target_w = target_h = target_size
    else:
        target_w, target_h = target_size
    if target_w <= 0 or target_h <= 0:
        raise ValueError(f"Preview size must be positive, got {target_w}x{target_h}")

    result = PixelBuffer(target_w, target_h)
    src, dst = buffer.data, result.data
    src_w, src_h = buffer.width, buffer.height

    for y in range(target_h):
        src_y = y * src_h // target_h
        for x in range(target_w):
            src_x = x * src_w // target_w
            s = (src_y * src_w + src_x) * 4
            d = (y * target_w + x) * 4
            dst[d:d + 4] = src[s:s + 4]

    return result
