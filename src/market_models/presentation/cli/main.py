"""
Command line interface for the market-models package.
"""

import sys
import argparse
from typing import Any, Dict, List, Optional

from ...application.config.settings import ConfigManager
from ...application.use_cases.export_schemas import SchemaExporter
from ...data.models.registry import get_model, list_models
from ...data.validators.payload_validator import PayloadValidator
from ...infrastructure.error_handling import MarketModelsError
from ...infrastructure.monitoring import setup_logging
from ..formatters.console_formatter import ConsoleFormatter


class MarketModelsCLI:
    """
    CLI for inspecting the shared models, exporting their JSON Schemas and
    checking payload files against them.
    """

    def __init__(self):
        self.console_formatter = ConsoleFormatter()
        self.config_manager: Optional[ConfigManager] = None

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Main entry point for CLI."""
        parser = self._create_parser()
        args = parser.parse_args(argv)

        if not args.command:
            parser.print_help()
            return 2

        try:
            self.config_manager = ConfigManager(args.config)
            self._configure_logging(args.log_level)
            return self._execute_command(args)

        except MarketModelsError as e:
            self.console_formatter.print_error(f"{type(e).__name__}: {e.message}")
            return 1

    def _create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="market-models",
            description="Shared market data models: schema export and payload validation",
            formatter_class=argparse.RawDescriptionHelpFormatter
        )

        parser.add_argument(
            '--config',
            default=None,
            help='Path to a YAML settings file merged over the packaged defaults'
        )

        parser.add_argument(
            '--log-level',
            choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
            default=None,
            help='Override the configured logging level'
        )

        parser.add_argument(
            '--output-format',
            choices=['text', 'json'],
            default='text',
            help='Output format'
        )

        subparsers = parser.add_subparsers(dest='command', help='Available commands')

        subparsers.add_parser('models', help='List registered models')

        self._add_schema_parser(subparsers)
        self._add_validate_parser(subparsers)
        self._add_config_parser(subparsers)

        return parser

    def _add_schema_parser(self, subparsers):
        schema_parser = subparsers.add_parser('schema', help='JSON Schema commands')
        schema_subparsers = schema_parser.add_subparsers(dest='schema_action')

        show_parser = schema_subparsers.add_parser('show', help='Print the JSON Schema of one model')
        show_parser.add_argument('model', help='Model name, e.g. OptionContract')

        export_parser = schema_subparsers.add_parser('export', help='Write JSON Schema files')
        export_parser.add_argument(
            '--output-dir',
            default=None,
            help='Directory for the schema files (defaults to export.output_dir)'
        )
        export_parser.add_argument(
            '--models',
            nargs='+',
            default=None,
            help='Models to export (defaults to export.models, or all)'
        )
        export_parser.add_argument(
            '--bundle',
            action='store_true',
            help='Also write a single bundled schema document'
        )

    def _add_validate_parser(self, subparsers):
        parser = subparsers.add_parser('validate', help='Validate a JSON payload file')
        parser.add_argument('model', help='Model name, e.g. Playlist')
        parser.add_argument('path', help='JSON file holding one object or a list of objects')
        parser.add_argument(
            '--fail-on-warning',
            action='store_true',
            default=None,
            help='Treat warnings as failures'
        )

    def _add_config_parser(self, subparsers):
        config_parser = subparsers.add_parser('config', help='Configuration management')
        config_subparsers = config_parser.add_subparsers(dest='config_action')

        config_subparsers.add_parser('show', help='Show configuration')
        config_subparsers.add_parser('validate', help='Validate configuration')

    def _configure_logging(self, log_level: Optional[str]):
        logging_config = self.config_manager.get_logging_config()
        setup_logging(
            log_level=log_level or self.config_manager.get_log_level(),
            log_dir=logging_config.log_dir,
            enable_console=logging_config.enable_console,
            enable_file=logging_config.enable_file,
            enable_json=logging_config.enable_json
        )

    def _execute_command(self, args) -> int:
        if args.command == 'models':
            return self._execute_models(args)
        elif args.command == 'schema':
            return self._execute_schema(args)
        elif args.command == 'validate':
            return self._execute_validate(args)
        elif args.command == 'config':
            return self._execute_config(args)
        else:
            raise ValueError(f"Unknown command: {args.command}")

    def _execute_models(self, args) -> int:
        names = list_models()
        if args.output_format == 'json':
            self.console_formatter.print_json({'models': names})
            return 0

        rows = []
        for name in names:
            model = get_model(name)
            required = sum(1 for f in model.model_fields.values() if f.is_required())
            rows.append([name, str(len(model.model_fields)), str(required)])
        self.console_formatter.print_table_simple(['Model', 'Fields', 'Required'], rows)
        return 0

    def _execute_schema(self, args) -> int:
        export_config = self.config_manager.get_export_config()
        exporter = SchemaExporter(indent=export_config.indent)

        if args.schema_action == 'show':
            self.console_formatter.print_json(exporter.build_schema(args.model), indent=export_config.indent or None)
            return 0

        if args.schema_action == 'export':
            result = exporter.export(
                output_dir=args.output_dir or export_config.output_dir,
                models=args.models or export_config.models,
                bundle=args.bundle
            )
            if args.output_format == 'json':
                self.console_formatter.print_json(result.to_dict())
            else:
                self.console_formatter.print_success(
                    f"Exported {result.count} schema(s) to {result.output_dir}"
                )
                if result.bundle_path:
                    self.console_formatter.print_key_value('bundle', result.bundle_path, indent=1)
            return 0

        self.console_formatter.print_error("Missing schema action: choose 'show' or 'export'")
        return 2

    def _execute_validate(self, args) -> int:
        fail_on_warning = args.fail_on_warning
        if fail_on_warning is None:
            fail_on_warning = self.config_manager.get_validation_config().fail_on_warning

        result = PayloadValidator().validate_file(args.model, args.path)
        passed = result.passes(fail_on_warning=fail_on_warning)

        if args.output_format == 'json':
            self.console_formatter.print_json(result.to_dict())
        else:
            for issue in result.issues:
                self._print_issue(issue)
            if passed:
                self.console_formatter.print_success(
                    f"{args.path}: {result.item_count} valid {result.model_name} item(s)"
                )
            else:
                self.console_formatter.print_error(
                    f"{args.path}: {len(result.get_errors())} error(s), "
                    f"{len(result.get_warnings())} warning(s)"
                )

        return 0 if passed else 1

    def _print_issue(self, issue):
        if issue.severity.value == 'error':
            self.console_formatter.print_error(str(issue))
        elif issue.severity.value == 'warning':
            self.console_formatter.print_warning(str(issue))
        else:
            self.console_formatter.print_info(str(issue))

    def _execute_config(self, args) -> int:
        if args.config_action == 'validate':
            # Loading already validated the file against the schema
            self.console_formatter.print_success(f"Configuration is valid: {self.config_manager!r}")
            return 0

        config: Dict[str, Any] = self.config_manager.get_config()
        self.console_formatter.print_json(config)
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    cli = MarketModelsCLI()
    return cli.run(argv)


if __name__ == '__main__':
    sys.exit(main())
