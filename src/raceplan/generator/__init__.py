"""Race report generation with Jinja2 templates."""

from raceplan.generator.render import ReportGenerator, create_jinja_env, report_filename

__all__ = [
    "ReportGenerator",
    "create_jinja_env",
    "report_filename",
]
