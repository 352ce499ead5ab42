"""Main application"""

import logging

from wheelpath.wheel import WheelParams


def main():
    """Main"""
    logging.basicConfig(level=logging.DEBUG)

    wheel = WheelParams(outer_radius=150, inner_radius=50, spoke_width=20)
    for path in wheel.sector_paths(8):
        print(path)


if __name__ == "__main__":
    main()
