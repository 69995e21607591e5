"""Interactive command-line fact checker."""

import asyncio
import logging
import os

from .domain.errors import FactCheckError
from .domain.models.claim import Claim
from .infrastructure.dependencies import get_service_container

DECISION_LABELS = {
    "true": "সত্য",
    "false": "মিথ্যা",
    "partially_true": "আংশিক সত্য",
}


async def main():
    """Run the fact checker."""
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    print("Satyata - Bengali news fact checking with web search")
    print("----------------------------------------------------")

    container = get_service_container()

    try:
        while True:
            # Get claim from user
            text = input("\nEnter news text to fact-check (or 'quit' to exit): ")
            if text.lower() in ("quit", "exit", "q"):
                break
            image_url = input("Image URL (optional, press Enter to skip): ").strip() or None

            print("\nChecking facts...")
            try:
                claim = Claim.create(text, image_url)
                service = await container.get_fact_checking_service()
                result = await service.fact_check(claim)
            except FactCheckError as e:
                print(f"\nError checking facts: {e}")
                continue

            print("\nResults:")
            print(f"Decision: {DECISION_LABELS[result.decision.value]} ({result.decision.value})")
            print(f"Confidence: {result.confidence}%")
            print(f"\nSummary: {result.summary}")

            print("\nInvestigation suggestions:")
            for i, suggestion in enumerate(result.investigation_suggestions, 1):
                print(f"{i}. {suggestion}")

            if result.sources:
                print("\nSources:")
                for i, source in enumerate(result.sources, 1):
                    print(f"{i}. {source}")

    finally:
        # Clean up
        await container.shutdown()


def cli():
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    cli()
