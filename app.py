import os
import sys
import argparse
from colorama import init as colorama_init
from colorama import Fore, Style
import tgawriter.common as cm
import tgawriter.utils as ut
from tgawriter.TGA import Color, create_image, write_image
from tgawriter.errors import TGAError

def build_parser(defaults):
    parser = argparse.ArgumentParser(
        description="Create an uncompressed 32-bit TGA image.",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument("output",
        help = "Path of the .tga file to write. Relative paths are resolved\n"
               "against OutputPath from settings.ini.")
    parser.add_argument("width", type = int, help = "Image width in pixels.")
    parser.add_argument("height", type = int, help = "Image height in pixels.")
    parser.add_argument("--color", default = defaults['blank_color'],
        help = "Blank color as B,G,R,A (default: %(default)s).")
    parser.add_argument("--pixel", action = "append", default = [],
        metavar = "X,Y,B,G,R,A",
        help = "Set one pixel, may be repeated.")
    orientation = parser.add_mutually_exclusive_group()
    orientation.add_argument("--top-to-bottom", dest = "top_to_bottom",
        action = "store_true", help = "Pixel y counts from the top row.")
    orientation.add_argument("--bottom-to-top", dest = "top_to_bottom",
        action = "store_false", help = "Pixel y counts from the bottom row.")
    parser.set_defaults(top_to_bottom = defaults['top_to_bottom'])
    parser.add_argument("--keep-existing", action = "store_true",
        help = "Write to a new numbered file instead of overwriting.")
    return parser

def run(args, output_path):
    image = create_image(args.width, args.height, Color.from_string(args.color))
    if image.width == 0 or image.height == 0:
        print(f"{Fore.YELLOW}Warning: {image.width}x{image.height} image has no pixel data.{Style.RESET_ALL}")

    for pixel in args.pixel:
        x, y, *channels = ut.parse_int_list(pixel, 6)
        image.set_pixel(x, y, Color(*channels), args.top_to_bottom)

    path = args.output
    if not os.path.isabs(path):
        path = os.path.join(output_path, path)
    if args.keep_existing:
        path = ut.uniquify(path)
    write_image(path, image)
    return path

def main(argv = None):
    colorama_init()
    defaults = cm.load_settings()
    args = build_parser(defaults).parse_args(argv)

    try:
        path = run(args, defaults['output_path'])
    except (TGAError, ValueError) as e:
        print(f"{Fore.RED}Error: {e}{Style.RESET_ALL}")
        return 1

    print(f"{Fore.GREEN}Wrote {path}{Style.RESET_ALL}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
