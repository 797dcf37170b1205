import argparse
import sys

from playlist_loader import ConfigError, load_playlist


def main(argv=None):
    ap = argparse.ArgumentParser(description="Stage timer for a list of persons")
    ap.add_argument("playlist", help="YAML playlist file (persons, acts, …)")
    ap.add_argument("--fullscreen", action="store_true",
                    help="start in fullscreen instead of a window")
    args = ap.parse_args(argv)

    try:
        playlist = load_playlist(args.playlist)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    from app import TimerApp      # pygame only once the playlist is good
    TimerApp(playlist, fullscreen=args.fullscreen or None).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
