from dataclasses import dataclass

@dataclass(frozen=True)
class ElementKind:
    name: str           # used verbatim as the extension of extracted files
    category: str       # "image" or "video"
    mime: str

    def __str__(self) -> str:
        return self.name

# --- Element kinds found in a live photo ---

JPEG = ElementKind(
    name="Jpg",
    category="image",
    mime="image/jpeg",
)

PNG = ElementKind(
    name="Png",
    category="image",
    mime="image/png",
)

MP4 = ElementKind(
    name="Mp4",
    category="video",
    mime="video/mp4",
)

# --- Byte signatures ---

LOOKAHEAD = 8                        # bytes peeked before every dispatch

JPEG_SOI = b"\xFF\xD8"               # start of image
JPEG_SOS = b"\xFF\xDA"               # start of scan, entropy data follows its header
JPEG_EOI = b"\xFF\xD9"               # end of image

PNG_SIGNATURE = b"\x89PNG\r\n\x1A\n"
# zero length + "IEND" + fixed CRC
PNG_IEND_CHUNK = b"\x00\x00\x00\x00IEND\xAE\x42\x60\x82"

# ISO-BMFF: first 4 bytes are the box size, the next 4 the box type
MP4_FTYP = b"ftyp"
MP4_FTYP_OFFSET = 4

# vendor marker between the still image and the video; carries no payload
LIVE_SEPARATOR = b"LIVE_CVR"
