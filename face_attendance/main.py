"""
Face Attendance - Main Entry Point

Console menu for webcam attendance:
1. Start attendance (live camera)
2. View today's attendance
3. Exit

With --serve, runs the HTTP reporting server instead of the menu.
"""

import os
import sys
import argparse
from dataclasses import replace
from pathlib import Path
from typing import Callable

from .config import Config, load_config
from .detector import initialize_detector
from .ledger import AttendanceLedger
from .logging_config import setup_logging, get_logger
from .registry import FaceRegistry
from .session import AttendanceSession
from . import video_loop

logger = get_logger(__name__)

MENU = (
    '\n==== Face Attendance ====\n'
    '1. Start Attendance (webcam)\n'
    "2. View Today's Attendance\n"
    '3. Exit'
)


def _load_local_env() -> None:
    """Load environment variables from face_attendance/.env if present."""
    env_path = Path(__file__).resolve().parent / '.env'
    if not env_path.exists():
        return

    for raw_line in env_path.read_text().splitlines():
        line = raw_line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, value = line.split('=', 1)
        os.environ.setdefault(key.strip(), value.strip())


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Face Attendance - webcam attendance by face recognition'
    )

    parser.add_argument(
        '--photos',
        type=str,
        help='Directory of reference photos (or set PHOTOS_DIR)'
    )

    parser.add_argument(
        '--attendance-file',
        type=str,
        help='Attendance ledger file (or set ATTENDANCE_FILE)'
    )

    parser.add_argument(
        '--camera',
        type=str,
        help='Camera index or stream URL (or set CAMERA_SOURCE)'
    )

    parser.add_argument(
        '--serve',
        action='store_true',
        help='Run the HTTP reporting server instead of the console menu'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    return parser.parse_args(argv)


def apply_args(config: Config, args: argparse.Namespace) -> Config:
    """Override configuration with command line values."""
    overrides = {}
    if args.photos:
        overrides['photos_dir'] = args.photos
    if args.attendance_file:
        overrides['attendance_file'] = args.attendance_file
    if args.camera:
        overrides['camera_source'] = args.camera
    if args.debug:
        overrides['debug_mode'] = True
    return replace(config, **overrides)


def build_session(config: Config) -> AttendanceSession:
    """Create the attendance session and load today's records."""
    session = AttendanceSession(
        AttendanceLedger(config.attendance_file),
        cooldown_seconds=config.mark_cooldown_seconds,
        zero_pad_dates=config.zero_pad_dates,
    )
    session.load_today()
    return session


def show_today(session: AttendanceSession, write: Callable[[str], None] = print) -> None:
    """Print today's attendance."""
    names = session.list_today()
    write(f'\nAttendance for {session.today()}:')
    if not names:
        write('No attendance yet.')
    for name in names:
        write(f'- {name}')


def run_menu(
    config: Config,
    detector,
    registry: FaceRegistry,
    session: AttendanceSession,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Console menu loop. Returns on '3' or end of input.

    Args:
        config: Application configuration
        detector: Face detector
        registry: Known faces
        session: Attendance session
        read: Prompt function
        write: Output function
    """
    while True:
        write(MENU)
        try:
            choice = read('Choice: ').strip()
        except EOFError:
            write('Goodbye!')
            return

        if choice == '1':
            try:
                video_loop.run(config, detector, registry, session)
            except RuntimeError as e:
                logger.error(f'Live attendance stopped: {e}')
        elif choice == '2':
            show_today(session, write)
        elif choice == '3':
            write('Goodbye!')
            return
        else:
            write('Invalid choice.')


def serve(config: Config) -> None:
    """Run the HTTP reporting server."""
    from .app import create_app

    logger.info(f'Starting reporting server on port {config.api_port}...')
    app = create_app(config)
    app.run(
        host='0.0.0.0',
        port=config.api_port,
        debug=False,
        use_reloader=False
    )


def main(argv=None) -> None:
    """Main entry point."""
    _load_local_env()
    args = parse_args(argv)
    config = apply_args(load_config(), args)

    setup_logging(config.camera_source, config.debug_mode)

    logger.info('=' * 60)
    logger.info('Face Attendance')
    logger.info('=' * 60)
    logger.info(f'Photos: {config.photos_dir}')
    logger.info(f'Ledger: {config.attendance_file}')
    logger.info(f'Threshold: {config.match_threshold}, face size: {config.face_size}')
    logger.info(
        f'Verification: {config.verification_seconds}s, '
        f'cooldown: {config.mark_cooldown_seconds}s'
    )
    logger.info('=' * 60)

    if args.serve:
        serve(config)
        return

    try:
        detector = initialize_detector(config)
        session = build_session(config)
        registry = FaceRegistry.load(config.photos_dir, detector, config)
    except (RuntimeError, OSError) as e:
        logger.error(f'Startup failed: {e}')
        sys.exit(1)

    try:
        run_menu(config, detector, registry, session)
    except KeyboardInterrupt:
        logger.info('Received keyboard interrupt, shutting down...')
        sys.exit(0)


if __name__ == '__main__':
    main()
