import sys
from eyeview import ViewBasis, EyeviewError

def read_point(prompt):
    """Reads three whitespace-separated numbers from stdin."""
    print(prompt, end="", flush=True)
    return tuple(float(v) for v in sys.stdin.readline().split()[:3])

def main():
    """
    Projects points through a view screen given directly by its anchor points.

    Enter the eye E, the view-center point A and the screen-basis points B
    and C, then three points P1, P2, P3 to project.
    """
    e = read_point("enter E: ")
    a = read_point("enter A: ")
    b = read_point("enter B: ")
    c = read_point("enter C: ")

    try:
        basis = ViewBasis.from_anchors(e, a, b, c)
    except EyeviewError as err:
        print(f"ERROR: {err}", file=sys.stderr)
        return 1

    for i in range(1, 4):
        p = read_point(f"enter any point P{i} in space: ")
        try:
            beta, gamma, lam = basis.project(p)
        except EyeviewError as err:
            print(f"WARNING: P{i}: {err}", file=sys.stderr)
            continue
        print(f"beta{i} = {beta} gamma{i} = {gamma} lambda{i} = {lam}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
