"""CLI for printing the kinship mesh of a memorial, or kinship search results, as JSON"""

import argparse
import json

from kinmesh.config import settings
from kinmesh.domain.relations import RelationKind
from kinmesh.memorial_store.local import LocalMemorialStore
from kinmesh.search import KinshipSearchService


def main(store_path: str, memorial_id: str | None, query: str | None) -> None:
    store = LocalMemorialStore(filepath=store_path)
    service = KinshipSearchService(
        store,
        default_relation=RelationKind(settings.default_relation),
        limit=settings.search_limit,
    )

    if memorial_id:
        output = service.mesh_for(memorial_id).model_dump(mode="json")
    else:
        output = [result.model_dump(mode="json") for result in service.search(query or "")]

    print(json.dumps(output, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--store",
        type=str,
        required=False,
        help="Local memorial store file",
        default=settings.local_memorial_store_path,
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--memorial-id", type=str, help="Print the kinship mesh of this memorial")
    group.add_argument("--query", type=str, help="Search memorials by deceased or author name")

    args = parser.parse_args()

    main(store_path=args.store, memorial_id=args.memorial_id, query=args.query)
