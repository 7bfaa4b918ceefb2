"""Cliente Routes - the Portuguese-named resource shares the pipeline, not the data.

Invariants:
    - /cliente binds {id, name, idade}
    - /cliente and /customer read and write separate collections
"""


async def test_cliente_lifecycle(client):
    res = await client.post("/cliente", json={"name": "Ana", "idade": 30})
    assert res.status_code == 200
    created = res.json()["body"]
    assert created["idade"] == 30

    res = await client.put("/cliente", json={"id": created["id"], "idade": 31})
    assert res.status_code == 200

    res = await client.get("/cliente")
    assert res.json()["body"] == [{"id": created["id"], "name": "Ana", "idade": 31}]

    res = await client.request("DELETE", "/cliente", json={"id": created["id"]})
    assert res.status_code == 200
    assert (await client.get("/cliente")).json()["body"] == []


async def test_cliente_and_customer_are_isolated(client):
    customer = (await client.post(
        "/customer", json={"name": "Bruno", "age": 20},
    )).json()["body"]
    cliente = (await client.post(
        "/cliente", json={"name": "Bruna", "idade": 21},
    )).json()["body"]

    assert (await client.get("/customer")).json()["body"] == [customer]
    assert (await client.get("/cliente")).json()["body"] == [cliente]

    # a customer id is unknown to /cliente
    res = await client.request("DELETE", "/cliente", json={"id": customer["id"]})
    assert res.status_code == 200
    assert (await client.get("/customer")).json()["body"] == [customer]


async def test_cliente_rejects_string_idade(client):
    res = await client.post("/cliente", json={"name": "Caio", "idade": "dez"})
    assert res.status_code == 400
    assert res.json() == {"message": "Incorrect data", "body": None}
