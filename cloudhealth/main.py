import argparse
import json
import logging
import sys

from .api.client import CloudHealthClient
from .api.exceptions import CloudHealthError
from .core.export import CostDataExporter
from .core.report_processor import CostReportProcessor
from .resources.reports import CostHistoryRequestOptions
from .utils.logging_config import configure_logging
from .config.settings import (
    CLOUDHEALTH_API_KEY,
    CLOUDHEALTH_ENDPOINT_URL,
    DEFAULT_EXPORT_PATH,
    DEFAULT_REPORT_INTERVAL,
    DEFAULT_REPORT_MEASURES,
)

logger = logging.getLogger(__name__)

LIST_COMMANDS = {
    'accounts': 'aws_accounts',
    'customers': 'customers',
    'organizations': 'organizations',
}


def parse_arguments(argv=None):
    """Parse command line arguments with defaults from .env file."""
    parser = argparse.ArgumentParser(
        description="CloudHealth API export tool",
        epilog="Credentials and endpoint can be set in the .env file instead of on the command line."
    )
    parser.add_argument('command', choices=sorted(LIST_COMMANDS) + ['cost-report'],
                        help='What to fetch from CloudHealth')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')

    auth_group = parser.add_argument_group('Authentication')
    auth_group.add_argument('--api-key', default=CLOUDHEALTH_API_KEY,
                            help='CloudHealth API key (default: CLOUDHEALTH_API_KEY)')
    auth_group.add_argument('--endpoint-url', default=CLOUDHEALTH_ENDPOINT_URL,
                            help=f'CloudHealth API endpoint (default: {CLOUDHEALTH_ENDPOINT_URL})')

    report_group = parser.add_argument_group('Cost report')
    report_group.add_argument('--measures', default=DEFAULT_REPORT_MEASURES,
                              help=f'Report measure (default: {DEFAULT_REPORT_MEASURES})')
    report_group.add_argument('--interval', default=DEFAULT_REPORT_INTERVAL,
                              help=f'Report interval (default: {DEFAULT_REPORT_INTERVAL})')
    report_group.add_argument('--time', default=None,
                              help='Time window filter, e.g. 2023-01 or current')
    report_group.add_argument('--client-api-id', default=None,
                              help='Report on behalf of this partner customer')
    report_group.add_argument('--account', default=None,
                              help='Restrict the report to one AWS account')

    output_group = parser.add_argument_group('Output')
    output_group.add_argument('--output', default=DEFAULT_EXPORT_PATH,
                              help=f'Output CSV file path for cost-report (default: {DEFAULT_EXPORT_PATH})')

    args = parser.parse_args(argv)

    if not args.api_key:
        parser.error("An API key is required: pass --api-key or set CLOUDHEALTH_API_KEY in the .env file")

    if args.command == 'cost-report' and not args.time:
        parser.error("--time is required for cost-report")

    return args


def export_cost_report(client, args):
    options = CostHistoryRequestOptions(
        measures=args.measures,
        interval=args.interval,
        time=args.time,
        client_api_id=args.client_api_id,
        target_aws_account_id=args.account,
    )
    report = client.reports.get(options)

    processed = CostReportProcessor().to_dataframe(report)
    output_file = CostDataExporter(args.output).to_csv(processed)

    if output_file:
        logger.success(f"CSV file exported successfully to: {output_file}")
        logger.info(f"Total categories exported: {len(processed)}")
    else:
        logger.warning("No data was exported")


def main(argv=None):
    """Main entry point for the application."""
    args = parse_arguments(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        client = CloudHealthClient(args.api_key, args.endpoint_url)
    except ValueError as e:
        logger.error(f"Configuration error: {str(e)}")
        return 1

    try:
        if args.command == 'cost-report':
            export_cost_report(client, args)
        else:
            resource = getattr(client, LIST_COMMANDS[args.command])
            items = resource.list()
            print(json.dumps([item.model_dump(mode="json", exclude_none=True) for item in items], indent=2))
            logger.success(f"Retrieved {len(items)} {args.command}")
    except CloudHealthError as e:
        logger.error(f"{type(e).__name__}: {str(e)}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
