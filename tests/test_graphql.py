import pytest


def gql(client, resource, query, variables=None):
    response = client.post(f"/graphql/v1/{resource}", json={"query": query, "variables": variables or {}})
    assert response.status_code == 200
    return response.json()


def test_users_query_list_and_single(client):
    body = gql(client, "users", "{ users(skip: 1, limit: 2) { id firstName } user(id: 1) { email city } }")

    assert body["data"]["users"] == [{"id": 2, "firstName": "Noah"}, {"id": 3, "firstName": "Mia"}]
    assert body["data"]["user"] == {"email": "ava.thompson@example.com", "city": "Seattle"}


def test_missing_record_resolves_to_null(client):
    body = gql(client, "movies", "{ movie(id: 404) { title } }")

    assert body["data"]["movie"] is None


def test_user_mutations_mirror_rest(client):
    created = gql(
        client,
        "users",
        "mutation Create($input: UserInput!) { createUser(input: $input) { id firstName email } }",
        {"input": {"firstName": "Zoe", "lastName": "Ng", "email": "zoe@example.com"}},
    )["data"]["createUser"]
    assert created == {"id": 6, "firstName": "Zoe", "email": "zoe@example.com"}

    updated = gql(
        client,
        "users",
        "mutation { updateUser(id: 6, input: {city: \"Oslo\"}) { firstName city } }",
    )["data"]["updateUser"]
    assert updated == {"firstName": "Zoe", "city": "Oslo"}

    assert client.get("/rest-api/v1/users/6").json()["city"] == "Oslo"

    deleted = gql(client, "users", "mutation { deleteUser(id: 6) { id } }")["data"]["deleteUser"]
    assert deleted == {"id": 6}
    assert gql(client, "users", "mutation { deleteUser(id: 6) { id } }")["data"]["deleteUser"] is None


def test_create_with_invalid_input_reports_error(client):
    body = gql(
        client,
        "users",
        "mutation { createUser(input: {firstName: \"A\", lastName: \"B\", email: \"not-an-email\"}) { id } }",
    )

    assert body["data"] is None
    assert body["errors"]


@pytest.mark.parametrize(
    "resource, query, expected",
    [
        ("movies", "{ movies(limit: 1) { title director } }", {"movies": [{"title": "The Shawshank Redemption", "director": "Frank Darabont"}]}),
        ("jobs", "{ job(id: 1) { title remote jobType } }", {"job": {"title": "Backend Engineer", "remote": True, "jobType": "full-time"}}),
        ("products", "{ product(id: 2) { title price stock } }", {"product": {"title": "Ceramic Mug", "price": 12.5, "stock": 230}}),
    ],
)
def test_resource_queries(client, resource, query, expected):
    assert gql(client, resource, query)["data"] == expected


def test_product_partial_update(client):
    body = gql(client, "products", "mutation { updateProduct(id: 1, input: {stock: 3}) { title stock } }")

    assert body["data"]["updateProduct"] == {"title": "Wireless Headphones", "stock": 3}


def test_movie_create(client):
    body = gql(
        client,
        "movies",
        "mutation { createMovie(input: {title: \"Arrival\", year: 2016, genre: \"Sci-Fi\", director: \"Denis Villeneuve\"}) { id title rating } }",
    )

    assert body["data"]["createMovie"] == {"id": 6, "title": "Arrival", "rating": None}


def test_job_create_uses_defaults(client):
    body = gql(client, "jobs", "mutation { createJob(input: {title: \"QA\", company: \"Acme\", location: \"Lyon\"}) { jobType remote } }")

    assert body["data"]["createJob"] == {"jobType": "full-time", "remote": False}


def test_currency_exchange_rate(client):
    body = gql(client, "currency", "{ exchangeRate(from: \"USD\", to: \"INR\", amount: 2) { from to rate result } }")

    assert body["data"]["exchangeRate"] == {"from": "USD", "to": "INR", "rate": 83.5, "result": 167.0}


def test_currency_rates_and_unknown_code(client):
    rates = gql(client, "currency", "{ rates(base: \"USD\") { base rates { code rate } } }")["data"]["rates"]
    assert {"code": "EUR", "rate": 0.92} in rates["rates"]

    body = gql(client, "currency", "{ exchangeRate(to: \"XXX\") { rate } }")
    assert body["data"] is None
    assert "Unsupported currency" in body["errors"][0]["message"]


def test_weather_queries(client):
    body = gql(client, "weather", "{ weather(city: \"tokyo\") { city country temperature } cities }")

    assert body["data"]["weather"] == {"city": "Tokyo", "country": "JP", "temperature": 24.8}
    assert "London" in body["data"]["cities"]


def test_auth_flow(client):
    signup = gql(
        client,
        "auth",
        "mutation { signup(username: \"linus\", email: \"linus@example.com\", password: \"kernel42\") { token user { id username } } }",
    )["data"]["signup"]
    assert signup["user"]["username"] == "linus"

    login = gql(client, "auth", "mutation { login(username: \"linus\", password: \"kernel42\") { token } }")["data"]["login"]
    me = gql(client, "auth", "query Me($token: String!) { me(token: $token) { email } }", {"token": login["token"]})
    assert me["data"]["me"] == {"email": "linus@example.com"}

    logout = gql(client, "auth", "mutation Out($token: String) { logout(token: $token) }", {"token": login["token"]})
    assert logout["data"]["logout"] is True

    again = gql(client, "auth", "query Me($token: String!) { me(token: $token) { email } }", {"token": login["token"]})
    assert again["data"] is None


def test_auth_login_failure_is_an_error(client):
    body = gql(client, "auth", "mutation { login(username: \"demo\", password: \"nope\") { token } }")

    assert body["data"] is None
    assert "Invalid username or password" in body["errors"][0]["message"]


def test_graphiql_page_is_served(client):
    response = client.get("/graphql/v1/users", headers={"Accept": "text/html"})

    assert response.status_code == 200
    assert "graphiql" in response.text.lower()
