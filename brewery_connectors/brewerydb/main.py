import json

from brewery_connectors.brewerydb.api_client import BreweryDBClient
from brewery_connectors.core.exceptions import APIError


def main():

# Main pour tester une recherche BreweryDB

    query = input("🍺 Entrez une recherche (bière ou brasserie) : ").strip()
    search_type = input("🔎 Type (beer, brewery ou vide) : ").strip()

    print(f"\n⏳ Recherche de '{query}'...\n")

    try:
        client = BreweryDBClient.from_env()
        data = client.search(query, type=search_type)
    except (APIError, RuntimeError) as e:
        print(f"❌ {e}")
        return 1

    print(json.dumps(data, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
