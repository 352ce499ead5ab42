"""Creates a SVG file of a square page (200x200mm)
with a wheel of 8 segments in the middle of the page.
Each segment gets a curved label along its arc text path
and the segment number along its line text path.
"""

import math
import os

import svgwrite

from wheelpath.wheel import WheelParams

OUTPUT_FILE = "data/output/example/svg/wheel_8_segments.svg"

CANVAS_SIZE = 200  # page width and height in mm

SEGMENT_COUNT = 8
WHEEL = WheelParams(
    outer_radius=90,
    inner_radius=30,
    spoke_width=4,
    angle_offset=-math.pi / 2,  # first segment starts at the top
    center=(100, 100),
)

LABELS = ["North", "North-East", "East", "South-East", "South", "South-West", "West", "North-West"]


def main(output_file: str = OUTPUT_FILE):
    """Creates a SVG drawing object with a wheel of segments,
    adds the text guide paths as invisible definitions
    and places labels on them.
    Finally, it saves the drawing to a SVG file.
    """

    dwg = svgwrite.Drawing(
        output_file,
        size=(f"{CANVAS_SIZE}mm", f"{CANVAS_SIZE}mm"),
        viewBox=f"0 0 {CANVAS_SIZE} {CANVAS_SIZE}",
        profile="full",
    )

    segment_paths = WHEEL.sector_paths(SEGMENT_COUNT)
    arc_text_paths = WHEEL.arc_text_paths(SEGMENT_COUNT)
    line_text_paths = WHEEL.line_text_paths(SEGMENT_COUNT)

    for index, (segment, arc_guide, line_guide) in enumerate(zip(segment_paths, arc_text_paths, line_text_paths)):
        # Draw the segment itself
        dwg.add(dwg.path(d=segment, stroke="black", stroke_width=0.3, fill="lightgray"))

        # Guide paths are only referenced by textPath elements, not drawn
        dwg.defs.add(dwg.path(d=arc_guide, id=f"arc-guide-{index}"))
        dwg.defs.add(dwg.path(d=line_guide, id=f"line-guide-{index}"))

        arc_label = dwg.text("", font_size=5, text_anchor="middle")
        arc_label.add(dwg.textPath(f"#arc-guide-{index}", LABELS[index % len(LABELS)], startOffset="50%"))
        dwg.add(arc_label)

        line_label = dwg.text("", font_size=4, text_anchor="start")
        line_label.add(dwg.textPath(f"#line-guide-{index}", str(index + 1), startOffset="5%"))
        dwg.add(line_label)

    # Save the SVG file
    os.makedirs(os.path.dirname(output_file) or ".", exist_ok=True)
    dwg.saveas(output_file, pretty=True, indent=2)


if __name__ == "__main__":
    main()
