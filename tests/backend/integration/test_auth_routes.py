import uuid

import pytest

from authapi.core.security import decode_access_token, verify_password


pytestmark = pytest.mark.asyncio


async def register_user(client, username, email, password, confirmpassword=None):
    return await client.post(
        "/auth/register",
        json={
            "username": username,
            "email": email,
            "password": password,
            "confirmpassword": password if confirmpassword is None else confirmpassword,
        },
    )


async def login_user(client, email, password):
    return await client.post("/auth/login", json={"email": email, "password": password})


async def test_root_reports_running(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert resp.json() == {"message": "API está funcionando!"}


async def test_register_and_login_scenario(client):
    resp = await register_user(client, "ana", "ana@x.com", "secret1")
    assert resp.status_code == 201
    assert resp.json() == {"message": "Usuário registrado com sucesso"}

    # Same email again is a conflict
    dup = await register_user(client, "ana2", "ana@x.com", "secret1")
    assert dup.status_code == 400
    assert dup.json() == {"error": "Esse e-mail já está cadastrado"}

    bad_login = await login_user(client, "ana@x.com", "wrong")
    assert bad_login.status_code == 400
    assert bad_login.json() == {"error": "Senha incorreta"}

    ok = await login_user(client, "ana@x.com", "secret1")
    body = ok.json()
    assert ok.status_code == 200
    assert body["message"] == "Login bem-sucedido"
    assert isinstance(body["token"], str) and body["token"]


async def test_registered_password_is_hashed(client, sql_store):
    email = f"{uuid.uuid4().hex[:6]}@example.com"
    await register_user(client, "bob", email, "Plain#Text1")

    stored = await sql_store.find_by_email(email)
    assert stored is not None
    assert stored.username == "bob"
    assert stored.password_hash != "Plain#Text1"
    assert verify_password("Plain#Text1", stored.password_hash) is True


async def test_login_token_carries_identity(client, create_user):
    user, password = await create_user()
    resp = await login_user(client, user.email, password)
    assert resp.status_code == 200

    payload = decode_access_token(resp.json()["token"])
    assert payload["email"] == user.email
    assert payload["id"] == user.id


async def test_login_unknown_email(client):
    resp = await login_user(client, "nobody@example.com", "whatever")
    assert resp.status_code == 400
    assert resp.json() == {"error": "Usuário não encontrado"}


async def test_register_passwords_must_match(client):
    resp = await register_user(client, "carl", "carl@example.com", "one", confirmpassword="two")
    assert resp.status_code == 400
    assert resp.json() == {"error": "As senhas não coincidem"}


@pytest.mark.parametrize("missing", ["username", "email", "password", "confirmpassword"])
async def test_register_missing_field(client, missing):
    body = {"username": "dan", "email": "dan@example.com", "password": "pw", "confirmpassword": "pw"}
    body.pop(missing)
    resp = await client.post("/auth/register", json=body)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Todos os campos são obrigatórios"}


@pytest.mark.parametrize("body", [{}, {"email": "a@b.c"}, {"password": "pw"}, {"email": "", "password": "pw"}])
async def test_login_missing_field(client, body):
    resp = await client.post("/auth/login", json=body)
    assert resp.status_code == 400
    assert resp.json() == {"error": "E-mail e senha são obrigatórios"}


async def test_malformed_body_is_bad_request(client):
    resp = await client.post("/auth/login", content="not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Requisição inválida"}

    wrong_type = await client.post("/auth/login", json={"email": ["a"], "password": "pw"})
    assert wrong_type.status_code == 400


async def test_register_null_byte_password_is_bad_request(client):
    resp = await register_user(client, "ana", "ana@x.com", "ab\u0000cd")
    assert resp.status_code == 400
    assert resp.json() == {"error": "A senha não pode conter caracteres nulos"}


async def test_register_overlong_username_is_bad_request(client, sql_store):
    resp = await register_user(client, "u" * 300, "long@example.com", "secret1")
    assert resp.status_code == 400
    assert "255" in resp.json()["error"]
    assert await sql_store.find_by_email("long@example.com") is None
