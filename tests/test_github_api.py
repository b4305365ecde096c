import httpx
import pytest


def test_user_is_passed_through(client, fake_github, octocat):
    fake_github.add("/users/octocat", json=octocat)

    response = client.get("/api/github/octocat")

    assert response.status_code == 200
    assert response.json() == octocat


def test_repos_are_passed_through_with_defaults(client, fake_github, octocat_repos):
    fake_github.add("/users/octocat/repos", json=octocat_repos)

    response = client.get("/api/github/octocat/repos")

    assert response.status_code == 200
    assert response.json() == octocat_repos
    upstream = fake_github.requests[-1]
    assert upstream.url.params["sort"] == "updated"
    assert upstream.url.params["per_page"] == "100"


def test_repo_query_params_are_forwarded(client, fake_github, octocat_repos):
    fake_github.add("/users/octocat/repos", json=octocat_repos[:1])

    response = client.get("/api/github/octocat/repos", params={"sort": "pushed", "per_page": 5})

    assert response.status_code == 200
    upstream = fake_github.requests[-1]
    assert upstream.url.params["sort"] == "pushed"
    assert upstream.url.params["per_page"] == "5"


def test_upstream_headers(client, fake_github, octocat):
    fake_github.add("/users/octocat", json=octocat)

    client.get("/api/github/octocat")

    upstream = fake_github.requests[-1]
    assert upstream.headers["Accept"] == "application/vnd.github+json"
    assert upstream.headers["User-Agent"] == "portfolio-backend"
    assert "Authorization" not in upstream.headers


@pytest.mark.parametrize("status_code", [404, 500, 403])
def test_user_upstream_failure_is_generic_500(client, fake_github, status_code):
    fake_github.add("/users/ghost", status_code=status_code, json={"message": "upstream secret detail"})

    response = client.get("/api/github/ghost")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "message": "An error occurred while fetching GitHub data",
    }
    assert "upstream secret detail" not in response.text


@pytest.mark.parametrize("status_code", [404, 500])
def test_repos_upstream_failure_is_generic_500(client, fake_github, status_code):
    fake_github.add("/users/ghost/repos", status_code=status_code, json={"message": "upstream secret detail"})

    response = client.get("/api/github/ghost/repos")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "message": "An error occurred while fetching GitHub repository data",
    }


@pytest.mark.parametrize("exc", [httpx.ReadTimeout, httpx.ConnectError])
def test_transport_failure_is_generic_500(client, fake_github, exc):
    fake_github.add("/users/octocat", exc=exc)

    response = client.get("/api/github/octocat")

    assert response.status_code == 500
    assert response.json()["success"] is False


def test_single_upstream_call_per_request(client, fake_github):
    fake_github.add("/users/octocat", status_code=502, json={})

    client.get("/api/github/octocat")

    assert len(fake_github.requests) == 1


@pytest.mark.parametrize("params", [{"per_page": 0}, {"per_page": 101}, {"per_page": "many"}, {"sort": "stars"}])
def test_invalid_repo_query_is_400(client, fake_github, params):
    response = client.get("/api/github/octocat/repos", params=params)

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["errors"][0]["field"] in params
    assert fake_github.requests == []


def test_invalid_username_is_400(client, fake_github):
    response = client.get("/api/github/-bad_name")

    assert response.status_code == 400
    assert body_fields(response) == ["username"]
    assert fake_github.requests == []


def test_stats_endpoint_aggregates_through_proxy(client, fake_github, octocat, octocat_repos):
    fake_github.add("/users/octocat", json=octocat)
    fake_github.add("/users/octocat/repos", json=octocat_repos)

    response = client.get("/api/github/octocat/stats")

    assert response.status_code == 200
    body = response.json()
    assert body["stats"] == {"repos": 8, "stars": 3, "forks": 3, "followers": 9000}
    assert [p["name"] for p in body["featured_projects"]] == ["Hello-World", "Spoon-Knife"]
    assert body["featured_projects"][0]["url"] == "https://github.com/octocat/Hello-World"
    assert body["is_loading"] is False
    assert body["error"] is None


def test_stats_endpoint_reports_upstream_failure(client, fake_github, octocat):
    fake_github.add("/users/octocat", json=octocat)
    fake_github.add("/users/octocat/repos", status_code=500, json={})

    response = client.get("/api/github/octocat/stats")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "message": "An error occurred while fetching GitHub repository data",
    }


def body_fields(response):
    return [e["field"] for e in response.json()["errors"]]


def test_stats_endpoint_rejects_repo_object_payload(client, fake_github, octocat):
    fake_github.add("/users/octocat", json=octocat)
    fake_github.add("/users/octocat/repos", json={"message": "weird"})

    response = client.get("/api/github/octocat/stats")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "message": "An error occurred while fetching GitHub repository data",
    }


def test_stats_endpoint_rejects_repo_without_url(client, fake_github, octocat, octocat_repos):
    del octocat_repos[0]["html_url"]
    fake_github.add("/users/octocat", json=octocat)
    fake_github.add("/users/octocat/repos", json=octocat_repos)

    response = client.get("/api/github/octocat/stats")

    assert response.status_code == 500
    assert response.json()["success"] is False


def test_stats_endpoint_rejects_malformed_profile(client, fake_github, octocat_repos):
    fake_github.add("/users/octocat", json=["not", "a", "profile"])
    fake_github.add("/users/octocat/repos", json=octocat_repos)

    response = client.get("/api/github/octocat/stats")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "message": "An error occurred while fetching GitHub data",
    }
