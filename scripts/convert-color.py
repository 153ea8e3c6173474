import argparse

from ChromaColor import RGBColor, XYZColor, ConvertColor, ColorSpaceType
from ChromaColor.Utils.ParserOptions import AddColorArgs, AddIlluminantArgs, AddLoggingArgs, ConfigureLogging

parser = argparse.ArgumentParser(description='Convert a color given as text to another color space')
AddColorArgs(parser)
AddIlluminantArgs(parser)
AddLoggingArgs(parser)
args = parser.parse_args()
ConfigureLogging(args)

rgb = RGBColor.parse(args.color)
converted = ConvertColor(rgb, args.to, args.illuminant)

if isinstance(converted, XYZColor):
    print(f"X={converted.x:.5f} Y={converted.y:.5f} Z={converted.z:.5f} ({converted.illuminant})")
elif args.to == ColorSpaceType.LINEAR_SRGB:
    print(f"R={converted.r:.5f} G={converted.g:.5f} B={converted.b:.5f}")
else:
    print(converted)
print(rgb.write_colored_str(str(rgb)), rgb.write_color())
