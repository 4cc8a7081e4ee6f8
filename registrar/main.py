"""
Main entry point for the Registrar package.
"""

import argparse
import sys
from typing import List, Optional

import structlog

from .config import RegistrarConfig, load_config
from .core.entities import Student
from .core.enums import EXIT_STATUS_BY_KIND, EXIT_STATUS_UNCAUGHT, EXIT_STATUS_UNRECOGNIZED
from .core.exceptions import (
    ConfigurationError, GraduationMessageError, LowGpaError, MissingCourseError,
    MissingCreditsError, RegistrarException, StudentFaultError,
)
from .core.interfaces import OutputSink
from .core.sinks import ConsoleSink
from .logging_config import configure_logging
from .services import GraduationService, StudentRegistry

logger = structlog.get_logger(__name__)

UNCAUGHT_MESSAGE = "Uncaught exception. Program terminating"

# Roster used by the demo: two students tie on 3.8.
DEMO_ROSTER = [
    ("Jul", "Li", "M", "Ms.", 3.8, "C++", "117PSU"),
    ("Hana", "Sato", "U", "Dr.", 3.8, "C++", "178PSU"),
    ("Sara", "Kato", "B", "Dr.", 3.9, "C++", "272PSU"),
    ("Giselle", "LeBrun", "R", "Ms.", 3.4, "C++", "299TU"),
]


def fatal_handler(exc_type, exc, tb) -> None:
    """``sys.excepthook`` replacement: report and terminate with status 1."""
    logger.critical("uncaught_exception", error_type=exc_type.__name__, error=str(exc))
    print(UNCAUGHT_MESSAGE)
    sys.exit(EXIT_STATUS_UNCAUGHT)


def install_fatal_handler() -> None:
    sys.excepthook = fatal_handler


class RegistrarApp:
    """Wires configuration, logging, the registry and graduation checks together."""
    
    def __init__(self, config: Optional[RegistrarConfig] = None,
                 sink: Optional[OutputSink] = None,
                 graduation_service: Optional[GraduationService] = None):
        self._config = config or RegistrarConfig()
        self._sink = sink or ConsoleSink()
        self._registry = StudentRegistry(self._config)
        self._graduation_service = graduation_service or GraduationService(self._config.requirements)
    
    @property
    def registry(self) -> StudentRegistry:
        return self._registry
    
    @property
    def graduation_service(self) -> GraduationService:
        return self._graduation_service
    
    def run_demo(self) -> int:
        """Sort the demo roster by gpa and describe every student."""
        registry = self._registry
        body = registry.new_body()
        for fields in DEMO_ROSTER:
            with registry.create_student(*fields) as student:
                body.insert(student)
        
        body.sort_stable()
        for student in body:
            student.describe(self._sink)
        
        first = body[0]
        first.greet(f"Welcome, {first.first_name}", self._sink)
        first.promote_credential()
        first.describe(self._sink)
        
        self._sink.write_line(f"Total number of students: {registry.live_count}")
        body.clear()
        return 0
    
    def handle_graduation(self, student: Student) -> int:
        """Attempt graduation and map the outcome to an exit status."""
        sink = self._sink
        try:
            self._graduation_service.attempt_graduation(student)
        except LowGpaError as err:
            sink.write_line(f"Too low gpa: {err.gpa}")
            return EXIT_STATUS_BY_KIND[err.kind]
        except MissingCreditsError as err:
            sink.write_line(f"Missing {err.count} credits")
            return EXIT_STATUS_BY_KIND[err.kind]
        except MissingCourseError as err:
            sink.write_line(f"Missing course: {err.course}")
            return EXIT_STATUS_BY_KIND[err.kind]
        except GraduationMessageError as err:
            sink.write_line(err.text)
            return EXIT_STATUS_BY_KIND[err.kind]
        except StudentFaultError as err:
            sink.write_line(f"Error: {err.code}")
            return EXIT_STATUS_BY_KIND[err.kind]
        except RegistrarException as err:
            logger.error("graduation_unrecognized_failure", error=err.message)
            sink.write_line("Exiting")
            return EXIT_STATUS_UNRECOGNIZED
        
        sink.write_line("Moving onward with remainder of code.")
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="registrar", description="Student roster and graduation checks")
    parser.add_argument("--config", type=str, help="Configuration file path (JSON)")
    parser.add_argument("--log-level", type=str, help="Log level, e.g. DEBUG or INFO")
    parser.add_argument("--log-format", choices=["console", "json"], help="Log renderer")
    
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("demo", help="Sort and print the demo roster")
    
    graduate = subparsers.add_parser("graduate", help="Attempt to graduate one student")
    graduate.add_argument("--first", default="Ling", help="First name")
    graduate.add_argument("--last", default="Mau", help="Last name")
    graduate.add_argument("--initial", default="I", help="Middle initial")
    graduate.add_argument("--title", default="Ms.", help="Title")
    graduate.add_argument("--gpa", type=float, default=3.1, help="Grade point average")
    graduate.add_argument("--course", default="C++", help="Current course")
    graduate.add_argument("--id", dest="student_id", default="55UD", help="Student id")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    
    try:
        config = load_config(args.config, {'log_level': args.log_level, 'log_format': args.log_format})
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}", file=sys.stderr)
        return 2
    
    configure_logging(config.log_level, config.log_format)
    app = RegistrarApp(config)
    
    if args.command == "demo":
        return app.run_demo()
    
    with app.registry.create_student(args.first, args.last, args.initial, args.title,
                                     args.gpa, args.course, args.student_id) as student:
        return app.handle_graduation(student)


def run() -> None:
    install_fatal_handler()
    sys.exit(main())


if __name__ == "__main__":
    run()
