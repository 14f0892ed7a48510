"""Print a signed access token for calling the admin seed route locally."""

import argparse
from datetime import timedelta

from seedgate.core.security import create_access_token


def main() -> None:
    parser = argparse.ArgumentParser(description="Issue a development access token")
    parser.add_argument("subject", help="Caller identity to place in the 'sub' claim")
    parser.add_argument(
        "--minutes",
        type=int,
        default=None,
        help="Token lifetime in minutes (default: ACCESS_TOKEN_EXPIRE_MINUTES)",
    )
    args = parser.parse_args()

    expires = timedelta(minutes=args.minutes) if args.minutes else None
    token = create_access_token({"sub": args.subject}, expires_delta=expires)
    print(token)
    print(f"\ncurl -X POST -H 'Authorization: Bearer {token}' http://localhost:8000/api/admin/seed")


if __name__ == "__main__":
    main()
