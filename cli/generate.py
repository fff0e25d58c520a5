"""Monthly Fakturoid invoice generator CLI."""

import argparse
from pathlib import Path
from utils import setup_logging, load_config, InvoiceGeneratorError
from services import FakturoidClient, InvoiceStorage, SubjectService, PricingService
from use_cases import GenerateInvoiceUseCase

# resolved against the project, not the working directory
PROJECT_DIR = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG = PROJECT_DIR / "config.json"
DEFAULT_INVOICES_DIR = PROJECT_DIR / "invoices"


def build_parser():
    parser = argparse.ArgumentParser(
        prog="fakturoid-generate-invoice",
        description="Generate invoice <subject: be|fcs> <price: float>",
    )
    parser.add_argument("subject", type=str, help="be|fcs")
    parser.add_argument("price", type=str, help="price")
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG,
        help=f"Path to the JSON config file (default: {DEFAULT_CONFIG})",
    )
    parser.add_argument(
        "--invoices-dir",
        type=Path,
        default=DEFAULT_INVOICES_DIR,
        help=f"Directory the invoice PDFs are saved to (default: {DEFAULT_INVOICES_DIR})",
    )
    parser.add_argument("--debug", action="store_true", help="Debug")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logger = setup_logging(debug=args.debug)

    try:
        # reject bad input before reading config or touching the network
        SubjectService.validate(args.subject)
        PricingService.parse_price(args.price)

        config = load_config(args.config)
        with FakturoidClient(config.fakturoid) as client:
            use_case = GenerateInvoiceUseCase(
                config=config,
                client=client,
                storage=InvoiceStorage(args.invoices_dir),
            )
            use_case.generate(args.subject, args.price)
    except InvoiceGeneratorError as e:
        logger.error(f"Error generating the invoice: {e}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
