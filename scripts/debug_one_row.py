"""Look up the first record of a file and print what the service returned.

Usage: python scripts/debug_one_row.py sample_data/adresses.tsv
"""
import json
import sys
from pathlib import Path
from dotenv import load_dotenv

# ensure project root is on sys.path so `src` package can be imported when running script directly
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

load_dotenv()

from src.addrcheck.client import build_query, fetch_candidates, score_from_response
from src.addrcheck.config import load_settings
from src.addrcheck.records import read_records


def main():
    path = sys.argv[1] if len(sys.argv) > 1 else "sample_data/adresses.tsv"
    settings = load_settings()
    with open(path, newline="", encoding="utf-8-sig") as f:
        records = list(read_records(f, 1))
    if not records:
        print("No records in", path)
        return
    rec = records[0]
    print("Record:", rec)

    query = build_query(rec.street_address, rec.postal_code, rec.city)
    print("Query:", query)
    print("Endpoint:", settings.api_url)

    payload = fetch_candidates(query, settings)
    print("\nRAW:")
    print(json.dumps(payload, indent=2, ensure_ascii=False)[:4000])

    score = score_from_response(payload)
    print("\nScore:", score)
    print("Valid:", score is not None and score >= settings.min_score)


if __name__ == "__main__":
    main()
