import argparse

from ChromaColor import Illuminant, XYZColor
from ChromaColor.Utils.ParserOptions import AddDemoArgs, AddLoggingArgs, ConfigureLogging
from ChromaColor.Visualization.Terminal import XYZSweepRow

# Shows how the same XYZ coordinates look when they are taken to be seen under different illuminants.
# Each illuminant gets a vertical band; X varies down the rows and Z across the columns.
parser = argparse.ArgumentParser(description='Render XYZ sweeps under several illuminants in a truecolor terminal')
AddDemoArgs(parser)
AddLoggingArgs(parser)
args = parser.parse_args()
ConfigureLogging(args)

band_width = args.width // len(args.illuminants)

# the white points themselves, all shown as if they were seen under D65
print("".join(XYZColor.from_array(illuminant.white_point(), Illuminant.D65).write_color() * band_width
              for illuminant in args.illuminants))
print()

for i in range(args.height + 1):
    print(XYZSweepRow(i * 0.9 / args.height, args.luminance, args.illuminants, args.width))

# the same sweep under D65 alone, for comparison
print()
print()
for i in range(args.height + 1):
    print(XYZSweepRow(i * 0.9 / args.height, args.luminance, [Illuminant.D65], args.width))
