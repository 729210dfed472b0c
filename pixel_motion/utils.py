from PyQt6.QtGui import QImage


def buffer_to_qimage(buffer):
    """
    Wrap a PixelBuffer as a QImage.

    Both use straight RGBA byte order, so the bytes go across untouched.
    copy() detaches the image from the temporary bytes object.
    """
    image = QImage(bytes(buffer.data), buffer.width, buffer.height,
                   buffer.width * 4, QImage.Format.Format_RGBA8888)
    return image.copy()
