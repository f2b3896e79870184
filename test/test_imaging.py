# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import unittest
import io

from PIL import Image

from id3stack.errors import *
from id3stack.frames import PictureFrame, PictureFrame22
from id3stack.imaging import decode_image

def image_data(format, size=(4, 3)):
    buffer = io.BytesIO()
    Image.new("RGB", size, (255, 0, 0)).save(buffer, format)
    return buffer.getvalue()

class ImagingTestCase(unittest.TestCase):
    def testPNG(self):
        image = decode_image(image_data("PNG"), "image/png")
        self.assertEqual(image.size, (4, 3))
        self.assertEqual(image.format, "PNG")

    def testJPEG(self):
        data = image_data("JPEG", (8, 8))
        for mime in "image/jpeg", "image/jpg", "JPG":
            image = decode_image(data, mime)
            self.assertEqual(image.size, (8, 8))
            self.assertEqual(image.format, "JPEG")

    def testUnsupportedType(self):
        self.assertRaises(UnsupportedImageError, decode_image, image_data("GIF"), "image/gif")
        self.assertRaises(UnsupportedImageError, decode_image, image_data("PNG"), "")

    def testMismatchedData(self):
        self.assertRaises(UnsupportedImageError, decode_image, image_data("PNG"), "image/jpeg")
        self.assertRaises(UnsupportedImageError, decode_image, b"garbage", "image/png")
        self.assertRaises(UnsupportedImageError, decode_image, image_data("PNG")[:30], "image/png")

    def testPictureFrame(self):
        body = b"\x00image/png\x00\x03\x00" + image_data("PNG")
        frame = PictureFrame._from_data("APIC", body)
        self.assertEqual(frame.image().size, (4, 3))
        body = b"\x00PNG\x03\x00" + image_data("PNG")
        frame = PictureFrame22._from_data("PIC", body)
        self.assertEqual(frame.image().size, (4, 3))

suite = unittest.TestLoader().loadTestsFromTestCase(ImagingTestCase)

if __name__ == "__main__":
    unittest.main(defaultTest="suite")
