import math
from eyeview import *

def main():
    """
    Demonstrates projecting points with a camera and moving it around.

    This example shows how to:
    - Set up a camera from an eye position, azimuth and altitude.
    - Render single points and detect points behind the eye.
    - Turn and move the camera, which re-derives its view screen.
    - Render a batch of points with `render_many`.
    """
    cam = Camera(eye=(50, 50, 0), azimuth=225, altitude=0, distance=2, size=1)
    print(cam)

    # A point straight ahead, and one behind the eye.
    step = 5 / math.sqrt(2)
    ahead = (50 - step, 50 - step, 0)
    behind = (60, 60, 0)
    for p in (ahead, behind):
        beta, gamma, lam = cam.render(p)
        if lam == BEHIND_EYE:
            print(f"{p} is behind the eye.")
        else:
            print(f"{p} -> beta = {beta:.4f} gamma = {gamma:.4f} lambda = {lam:.4f}")

    # Turn a quarter to the left, then step up.
    cam.rotate(90).shift(0, 0, 1)
    print(cam)

    # A ring of points around the original eye position.
    ring = [(50 + 10 * math.cos(math.radians(a)), 50 + 10 * math.sin(math.radians(a)), 0)
            for a in range(0, 360, 30)]
    for row in cam.render_many(ring, verbose=True):
        print("beta = {:8.4f} gamma = {:8.4f} lambda = {:8.4f}".format(*row))

if __name__ == "__main__":
    main()
