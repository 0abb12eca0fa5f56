"""Shared fixtures: a small order-placement architecture graph."""

import json

import pytest


SHOP_GRAPH = {
    "version": "1.0",
    "metadata": {
        "name": "Shop",
        "domains": {
            "checkout": {"description": "Storefront", "systemType": "ui"},
            "orders": {"description": "Order placement", "systemType": "domain"},
            "shipping": {"description": "Fulfilment", "systemType": "domain"},
            "billing": {"description": "Ledgers", "systemType": "domain"},
        },
    },
    "components": [
        {"id": "ui:checkout", "type": "UI", "name": "Checkout Page", "domain": "checkout",
         "module": "web", "route": "/checkout"},
        {"id": "orders:api:place-order", "type": "API", "name": "Place Order", "domain": "orders",
         "module": "api", "apiType": "REST", "httpMethod": "POST"},
        {"id": "orders:uc:place-order", "type": "UseCase", "name": "Place Order Use Case",
         "domain": "orders", "module": "app"},
        {"id": "orders:op:create", "type": "DomainOp", "name": "Order.create", "domain": "orders",
         "module": "domain", "operationName": "create", "entity": "Order"},
        {"id": "orders:evt:placed", "type": "Event", "name": "OrderPlaced", "domain": "orders",
         "module": "domain", "eventName": "OrderPlaced"},
        {"id": "shipping:handler:on-placed", "type": "EventHandler", "name": "On Order Placed",
         "domain": "shipping", "module": "handlers", "subscribedEvents": ["OrderPlaced"]},
        {"id": "shipping:op:schedule", "type": "DomainOp", "name": "Shipment.schedule",
         "domain": "shipping", "module": "domain", "operationName": "schedule", "entity": "Shipment"},
        {"id": "billing:custom:ledger", "type": "Custom", "name": "Ledger", "domain": "billing",
         "module": "ledger", "customTypeName": "Ledger"},
    ],
    "links": [
        {"source": "ui:checkout", "target": "orders:api:place-order", "type": "sync"},
        {"source": "orders:api:place-order", "target": "orders:uc:place-order", "type": "sync"},
        {"source": "orders:uc:place-order", "target": "orders:op:create", "type": "sync"},
        {"source": "orders:op:create", "target": "orders:evt:placed", "type": "async"},
        {"source": "orders:evt:placed", "target": "shipping:handler:on-placed", "type": "async"},
        {"source": "shipping:handler:on-placed", "target": "shipping:op:schedule", "type": "sync"},
    ],
    "externalLinks": [
        {"source": "shipping:op:schedule", "target": {"name": "Carrier API", "url": "https://carrier.example"},
         "type": "sync"},
    ],
}


@pytest.fixture
def shop_graph_data():
    return json.loads(json.dumps(SHOP_GRAPH))


@pytest.fixture
def shop_graph_file(tmp_path, monkeypatch):
    """Write the graph to <tmp>/.riviere/graph.json and run from <tmp>."""
    graph_dir = tmp_path / ".riviere"
    graph_dir.mkdir()
    path = graph_dir / "graph.json"
    path.write_text(json.dumps(SHOP_GRAPH))
    monkeypatch.chdir(tmp_path)
    for var in ("ECLAIR_VIEWPORT_WIDTH", "ECLAIR_VIEWPORT_HEIGHT", "ECLAIR_FIT_PADDING"):
        monkeypatch.delenv(var, raising=False)
    return path
