"""
Agro-climatic prediction module.
Predicts conditions, crop suitability and alerts for farming locations.
"""

import os
import argparse
from datetime import date

from dotenv import load_dotenv

from agroclimate import EngineConfig, Predictor

load_dotenv(verbose=True, dotenv_path=".env")


def get_args():
    """
    Parse command line arguments for the agro-climatic predictor.
        :return: Parsed arguments.
        :rtype: argparse.Namespace
    """
    parser = argparse.ArgumentParser(description="Agro-Climatic Predictor")
    parser.add_argument("--all", action="store_true", help="Predict all locations")
    parser.add_argument("--id", type=str, help="Predict a single location by id")
    parser.add_argument("--dry-run", action="store_true", help="Perform a dry run")
    parser.add_argument(
        "--year",
        type=int,
        help="Year component of the date.",
        required=True,
    )
    parser.add_argument(
        "--month",
        type=int,
        help="Month component of the date.",
        required=True,
    )
    parser.add_argument(
        "--day",
        type=int,
        help="Day component of the date.",
        required=True,
    )
    parser.add_argument(
        "--horizon",
        type=int,
        default=7,
        help="Days ahead to predict.",
    )
    parser.add_argument(
        "--history-years",
        type=int,
        default=2,
        help="Years of history to analyze.",
    )

    args = parser.parse_args()

    if args.all and args.id:
        raise ValueError("Cannot specify both --all and --id")

    if not args.all and not args.id:
        raise ValueError("Must specify --all or --id")

    if args.horizon < 0:
        raise ValueError("--horizon must not be negative")

    if args.history_years < 1:
        raise ValueError("--history-years must be at least 1")

    args.date = date(args.year, args.month, args.day)
    args.db_url = os.getenv("DATABASE_CONNECTION_URL", "")

    return args


def main():
    """Main function to run the agro-climatic predictions."""

    args = get_args()

    predictor = Predictor(
        db_url=args.db_url,
        dry_run=args.dry_run,
        process_date=args.date,
        horizon_days=args.horizon,
        all_locations=args.all,
        location_id=args.id,
        history_years=args.history_years,
        config=EngineConfig.from_env(),
    )

    predictor.run()


if __name__ == "__main__":
    main()
