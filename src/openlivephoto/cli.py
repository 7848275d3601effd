import argparse, logging, sys
from typing import List, Optional

from .errors import LivePhotoError
from .parser import ContainerParser
from .recovery import ElementRecovery

def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="openlivephoto", description="Split a live photo into its image and video")
    p.add_argument("source", help="Path to the live photo")
    p.add_argument("--jpeg", metavar="OUT", help="Save the still JPEG image to OUT")
    p.add_argument("--mp4", metavar="OUT", help="Save the video to OUT")
    p.add_argument("--all", metavar="BASE", nargs="?", const="", default=None,
                   help="Save every element as BASE-01.Jpg, BASE-02.Mp4, ... (BASE defaults to the source)")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = p.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        container = ContainerParser().parse(args.source)
        rec = ElementRecovery(container)
        if args.jpeg:
            print(f"[jpeg] -> {rec.extract_jpeg(args.jpeg)}")
        if args.mp4:
            print(f"[mp4] -> {rec.extract_mp4(args.mp4)}")
        if args.all is not None:
            for out in rec.extract_all(args.all):
                print(f"[element] -> {out}")
        if not (args.jpeg or args.mp4 or args.all is not None):
            for el in container:
                print(f"{el.kind}\t{el.start}\t{el.end}\t{el.length}")
    except (LivePhotoError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
