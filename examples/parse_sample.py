from pathlib import Path

from dotenv import load_dotenv

from eventcite import extract_urls, format_citation, parse_citations
from eventcite.utils import setup_logging

SAMPLE_PATH = Path(__file__).resolve().parents[1] / "tests" / "fixtures" / "scramjet_description.txt"


def main() -> None:
    # Load EVENTCITE_LOG_LEVEL from .env if present
    load_dotenv()
    setup_logging()

    sample_text = SAMPLE_PATH.read_text(encoding="utf-8").strip()

    print("▶ Parsing sample event description...")
    print(f"Original text: {sample_text}\n")

    result = parse_citations(sample_text)

    print("Clean text:", result.clean_text or "(empty)")
    print("\nCitations:")
    for index, citation in enumerate(result.citations, start=1):
        print(f"{index}. {format_citation(citation)}")

    print("\nURLs:")
    for url in extract_urls(sample_text):
        print(f"- {url}")


if __name__ == "__main__":
    main()
