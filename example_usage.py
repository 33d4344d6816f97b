# example_usage.py - Walk through every operation against JSONPlaceholder

import asyncio
import logging
import sys

from dataprovider import (
    ProviderRegistry, load_config, DataProviderError,
    Identifier, Record, Resource,
    PaginationPayload, SortPayload, SortOrder,
    GetListParams, GetOneParams, GetManyParams, GetManyReferenceParams,
    CreateParams, UpdateParams, UpdateManyParams, DeleteParams, DeleteManyParams,
)
from dataprovider.adapters import RESTDataProvider

logging.basicConfig(level=logging.INFO)

def print_record(record: Record):
    print(f"Record ID: {record.id}")
    for key, value in record.fields.items():
        print(f"  {key}: {value}")

async def run_examples(api, resource: Resource):
    fields = {"userId": 1, "title": "pepe", "body": "sarasa"}

    print("###### LIST ######")
    result = await api.get_list(resource, GetListParams())
    print(f"Fetched {result.total} records")
    for record in result.data[:3]:
        print_record(record)

    print("###### ONE ######")
    result = await api.get_one(resource, GetOneParams(id=Identifier(1)))
    print_record(result.data)

    print("###### MANY ######")
    result = await api.get_many(resource, GetManyParams(ids=[Identifier(1), Identifier(2), Identifier(99)]))
    for record in result.data:
        print_record(record)

    print("###### MANY REFERENCE ######")
    result = await api.get_many_reference(resource, GetManyReferenceParams(
        target="comments",
        id=Identifier(1),
        pagination=PaginationPayload(page=1, per_page=10),
        sort=SortPayload(field="name", order=SortOrder.ASC),
    ))
    print(f"Post 1 has {result.total} comments")

    print("###### CREATE ######")
    result = await api.create(resource, CreateParams(data=fields))
    print_record(result.data)

    print("###### UPDATE ######")
    previous = Record(id=Identifier(1), fields=fields)
    result = await api.update(resource, UpdateParams(id=Identifier(1), data=fields, previous_data=previous))
    print_record(result.data)

    print("###### UPDATE MANY ######")
    result = await api.update_many(resource, UpdateManyParams(ids=[Identifier(1), Identifier(2)], data=fields))
    print(f"Updated: {[str(i) for i in result.data]}")

    print("###### DELETE ######")
    result = await api.delete(resource, DeleteParams(id=Identifier(1), previous_data=previous))
    print_record(result.data)

    print("###### DELETE MANY ######")
    result = await api.delete_many(resource, DeleteManyParams(ids=[Identifier(1), Identifier(2)]))
    print(f"Deleted: {[str(i) for i in result.data]}")

def main():
    if len(sys.argv) > 1:
        # python example_usage.py clients.yaml <client> <resource name>
        registry = ProviderRegistry.from_config(load_config(sys.argv[1]))
        client = sys.argv[2] if len(sys.argv) > 2 else registry.clients()[0]
        api = registry.get(client)
        resource = registry.resource(client, sys.argv[3]) if len(sys.argv) > 3 else Resource("posts")
    else:
        registry = None
        api = RESTDataProvider("http://jsonplaceholder.typicode.com/")
        resource = Resource("posts")

    try:
        asyncio.run(run_examples(api, resource))
    except DataProviderError as e:
        print(f"❌ {type(e).__name__}: {e}")
        sys.exit(1)
    finally:
        if registry is not None:
            registry.close()
        else:
            api.close()

if __name__ == "__main__":
    main()
