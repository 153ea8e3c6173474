import argparse
import logging

from ..ColorSpace import ColorSpaceType
from ..Observer import Illuminant


def AddIlluminantArgs(parser):
    parser.add_argument('--illuminant', type=Illuminant.from_name, default=Illuminant.D65,
                        choices=list(Illuminant), help='Illuminant for XYZ input and output')


def AddColorArgs(parser):
    parser.add_argument('color', type=str,
                        help='Color to read: hex code (#rrggbb, #rgb), X11 name, or rgb(r, g, b)')
    parser.add_argument('--to', type=lambda s: ColorSpaceType(s.lower()), default=ColorSpaceType.XYZ,
                        choices=list(ColorSpaceType), help='Color space to convert to')


def AddDemoArgs(parser):
    parser.add_argument('--width', type=int, default=120, help='Width of the demo in characters')
    parser.add_argument('--height', type=int, default=60, help='Height of the demo in lines')
    parser.add_argument('--luminance', type=float, default=0.5, help='Y value of the swept colors')
    parser.add_argument('--illuminants', nargs='+', type=Illuminant.from_name,
                        default=[Illuminant.D50, Illuminant.D75], help='Illuminants to compare')


def AddLoggingArgs(parser):
    parser.add_argument('--log_level', type=str.upper, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='Logging level')


def ConfigureLogging(args: argparse.Namespace) -> None:
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(levelname)s %(name)s: %(message)s')
