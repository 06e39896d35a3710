import argparse
import json
import logging
import sys

from .code import CaptionZone
from .encoding import encode
from .errors import ContentError, LayoutError
from .layout import layout
from .options import DEFAULT_MARKER_OVERLAP, RenderOptions
from .symbology import Symbology


parser = argparse.ArgumentParser(
    prog="linebars",
    description="Encode content as a linear barcode and print its geometry",
)
parser.add_argument(
    "--barcode-type",
    type=str,
    default="code128",
    choices=[symbology.value for symbology in Symbology],
    help="Type of barcode used."
)
parser.add_argument(
    "--scale",
    type=float,
    default=1,
    help="Width of thinnest bar."
)
parser.add_argument(
    "--caption",
    action="store_true",
    help="Lay out the caption under the barcode."
)
parser.add_argument(
    "--show-check-digits",
    action="store_true",
    help="Include check digits in the caption."
)
parser.add_argument(
    "--fill-quiet-zones",
    action="store_true",
    help="Fill empty quiet zones with angle brackets."
)
parser.add_argument(
    "--overlap",
    type=float,
    default=DEFAULT_MARKER_OVERLAP,
    help="Part of the caption height covered by marker bars, 0 to 1."
)
parser.add_argument(
    "--strict",
    action="store_true",
    help="Reject content instead of normalizing it."
)
parser.add_argument(
    "--format",
    type=str,
    default="text",
    choices=["text", "json"],
    help="Output format."
)
parser.add_argument(
    "--verbose",
    action="store_true",
    help="Log debugging information."
)
parser.add_argument(
    "content",
    type=str,
    help="Content of barcode."
)


def geometry_dict(code, geometry):
    return {
        "symbology": code.symbology.value,
        "content": code.full_content,
        "modules": "".join(str(bit) for bit in code.bits),
        "size": geometry.size._asdict(),
        "font": geometry.font_name,
        "bars": [bar._asdict() for bar in geometry.bars],
        "captions": {
            zone.value: {
                "rect": caption.rect._asdict(),
                "text": caption.text,
            }
            for zone, caption in geometry.captions.items()
        },
        "fillers": [
            {
                "zone": filler.zone.value,
                "rect": filler.rect._asdict(),
                "glyph": filler.glyph,
            }
            for filler in geometry.fillers
        ],
    }


def format_text(code, geometry):
    lines = [
        "{}: {}".format(code.symbology.value, code.full_content),
        "modules: {}".format("".join(str(bit) for bit in code.bits)),
        "size: {:g} x {:g}".format(*geometry.size),
        "bars: {}".format(len(geometry.bars)),
    ]
    for zone in CaptionZone:
        caption = geometry.captions.get(zone)
        if caption is not None and caption.text is not None:
            lines.append("{}: {}".format(zone.value, caption.text))
    return "\n".join(lines)


def main(cmd_args=None, out=None):
    if cmd_args is None:
        args = parser.parse_args()
    else:
        args = parser.parse_args(cmd_args)
    out = out or sys.stdout
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        code = encode(args.content, args.barcode_type, strict=args.strict)
        options = RenderOptions(
            bar_scale=args.scale,
            print_caption=args.caption,
            marker_overlap_percent=args.overlap,
            fill_empty_quiet_zones=args.fill_quiet_zones,
            show_check_digits=args.show_check_digits,
        )
        geometry = layout(code, options)
    except (ContentError, LayoutError) as exc:
        parser.error(str(exc))

    if args.format == "json":
        json.dump(geometry_dict(code, geometry), out, indent=2)
        out.write("\n")
    else:
        out.write(format_text(code, geometry) + "\n")


if __name__ == "__main__":
    main()
