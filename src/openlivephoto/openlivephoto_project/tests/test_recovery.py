import os
import tempfile

import pytest

from openlivephoto.errors import ElementNotFoundError, SourceMissingError, TruncatedInputError
from openlivephoto.parser import Container, Element, parse
from openlivephoto.rawio import extract_range
from openlivephoto.recovery import ElementRecovery, extract_all, extract_first
from openlivephoto.signatures import JPEG, PNG, MP4
from samples import make_jpeg, make_png, make_mp4, live_photo, write, read

def test_extract_all_naming():
    jpg, mp4 = make_jpeg(), make_mp4()
    with tempfile.TemporaryDirectory() as tmp:
        src = write(tmp, "live.jpg", live_photo(jpg, mp4))
        os.makedirs(os.path.join(tmp, "a"))
        out = extract_all(parse(src), os.path.join(tmp, "a", "b.jpg"))
        assert out == [os.path.join(tmp, "a", "b-01.Jpg"), os.path.join(tmp, "a", "b-02.Mp4")]
        assert sorted(os.listdir(os.path.join(tmp, "a"))) == ["b-01.Jpg", "b-02.Mp4"]
        assert read(out[0]) == jpg
        assert read(out[1]) == mp4

def test_extract_all_defaults_to_container_path():
    with tempfile.TemporaryDirectory() as tmp:
        src = write(tmp, "IMG_0001.jpg", live_photo(make_png(), make_mp4()))
        c = parse(src)
        for base in (None, "", "   "):
            out = ElementRecovery(c).extract_all(base)
            assert out == [os.path.join(tmp, "IMG_0001-01.Png"), os.path.join(tmp, "IMG_0001-02.Mp4")]

def test_extract_all_numbers_every_element():
    with tempfile.TemporaryDirectory() as tmp:
        src = write(tmp, "x.bin", live_photo(make_jpeg(), make_png(), make_mp4()))
        out = extract_all(parse(src))
        assert [os.path.basename(p) for p in out] == ["x-01.Jpg", "x-02.Png", "x-03.Mp4"]

def test_round_trip():
    with tempfile.TemporaryDirectory() as tmp:
        src = write(tmp, "live.jpg", live_photo(make_jpeg(), make_png(), make_mp4()))
        c = parse(src)
        for path, el in zip(extract_all(c), c):
            again = parse(path)
            assert list(again) == [Element(el.kind, 0, el.length - 1)]
            assert os.path.getsize(path) == el.length

def test_extract_jpeg_and_mp4():
    jpg, mp4 = make_jpeg(), make_mp4()
    with tempfile.TemporaryDirectory() as tmp:
        rec = ElementRecovery(parse(write(tmp, "live.jpg", live_photo(jpg, mp4))))
        photo = rec.extract_jpeg(os.path.join(tmp, "photo.jpg"))
        video = rec.extract_mp4(os.path.join(tmp, "video.mp4"))
        assert read(photo) == jpg
        assert read(video) == mp4

def test_extract_first_absent_kind_writes_nothing():
    with tempfile.TemporaryDirectory() as tmp:
        c = parse(write(tmp, "live.jpg", live_photo(make_jpeg(), make_mp4())))
        dest = os.path.join(tmp, "still.png")
        with pytest.raises(ElementNotFoundError):
            extract_first(c, PNG, dest)
        assert not os.path.exists(dest)

def test_extract_mp4_from_still_only():
    with tempfile.TemporaryDirectory() as tmp:
        rec = ElementRecovery(parse(write(tmp, "plain.jpg", make_jpeg())))
        with pytest.raises(ElementNotFoundError):
            rec.extract_mp4(os.path.join(tmp, "video.mp4"))

def test_source_removed_after_parse():
    with tempfile.TemporaryDirectory() as tmp:
        src = write(tmp, "live.jpg", live_photo(make_jpeg(), make_mp4()))
        c = parse(src)
        os.remove(src)
        with pytest.raises(SourceMissingError):
            extract_first(c, JPEG, os.path.join(tmp, "photo.jpg"))

def test_extract_all_stops_at_first_failure():
    jpg = make_jpeg()
    with tempfile.TemporaryDirectory() as tmp:
        src = write(tmp, "live.jpg", jpg)
        c = Container(src, (
            Element(JPEG, 0, len(jpg) - 1),
            Element(MP4, len(jpg) + 100, len(jpg) + 200),
            Element(JPEG, 0, len(jpg) - 1),
        ))
        with pytest.raises(TruncatedInputError):
            extract_all(c)
        assert os.path.exists(os.path.join(tmp, "live-01.Jpg"))
        assert not os.path.exists(os.path.join(tmp, "live-02.Mp4"))
        assert not os.path.exists(os.path.join(tmp, "live-03.Jpg"))

def test_extract_range_clamps_end():
    data = bytes(range(50))
    with tempfile.TemporaryDirectory() as tmp:
        src = write(tmp, "src.bin", data)
        dest = os.path.join(tmp, "out.bin")
        assert extract_range(src, 10, 10_000, dest) == 40
        assert read(dest) == data[10:]

def test_extract_range_inclusive_and_replaces_dest():
    data = bytes(range(50))
    with tempfile.TemporaryDirectory() as tmp:
        src = write(tmp, "src.bin", data)
        dest = write(tmp, "out.bin", b"x" * 500)
        assert extract_range(src, 3, 7, dest) == 5
        assert read(dest) == data[3:8]

def test_extract_range_past_end():
    with tempfile.TemporaryDirectory() as tmp:
        src = write(tmp, "src.bin", b"abc")
        dest = os.path.join(tmp, "out.bin")
        with pytest.raises(TruncatedInputError):
            extract_range(src, 10, 20, dest)
        assert not os.path.exists(dest)
