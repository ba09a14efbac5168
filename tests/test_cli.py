import json

import pytest
from click.testing import CliRunner

import blogtool.push as push_module
from blogtool.cli import cli
from gh import GitHubClient

from conftest import Recorder

ANSWERS = "bob\nnotes\nnew-token\ndev\n/\n"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def invoke(runner, config_root):
    def _invoke(args, **kwargs):
        return runner.invoke(
            cli,
            args,
            obj={},
            env={"BLOG_TOOL_CONFIG_DIR": str(config_root)},
            **kwargs,
        )

    return _invoke


@pytest.fixture
def post(tmp_path):
    path = tmp_path / "hello.md"
    path.write_text("# Hello\n", encoding="utf-8")
    return path


def test_no_args_prints_config_and_usage(invoke, saved_store):
    result = invoke([])

    assert result.exit_code == 0
    assert '"repo": "blog"' in result.output
    assert "Usage: cli push" in result.output
    assert "Usage: cli config" in result.output


def test_help_prints_usage_of_both_commands(invoke):
    result = invoke(["help"])

    assert result.exit_code == 0
    assert "-path" in result.output
    assert "-show" in result.output


@pytest.mark.parametrize("command", ["config", "push"])
def test_missing_parameters_exit_1(invoke, command):
    result = invoke([command])

    assert result.exit_code == 1
    assert "insufficient parameters supplied." in result.output
    assert f"Usage: cli {command}" in result.output


def test_unknown_command_exits_1(invoke):
    result = invoke(["pull"])

    assert result.exit_code == 1
    assert "unknown command 'pull'" in result.output


def test_config_show(invoke, saved_store):
    result = invoke(["config", "-show"])

    assert result.exit_code == 0
    assert json.loads(result.output)["username"] == "alice"


def test_config_delete(invoke, saved_store):
    result = invoke(["config", "delete"])

    assert result.exit_code == 0
    assert not saved_store.path.exists()


def test_config_new_recreates(invoke, saved_store):
    result = invoke(["config", "new"], input=ANSWERS)

    assert result.exit_code == 0
    assert saved_store.read().username == "bob"


def test_config_unknown_action_exits_1(invoke, saved_store):
    result = invoke(["config", "rename"])

    assert result.exit_code == 1
    assert saved_store.path.exists()


@pytest.fixture
def github(monkeypatch):
    """Route every GitHubClient built by a push through a recording transport."""
    recorder = Recorder(status_code=201)

    def client(**kwargs):
        kwargs["transport"] = recorder.transport
        return GitHubClient(**kwargs)

    monkeypatch.setattr(push_module, "GitHubClient", client)
    return recorder


def test_push_success(invoke, saved_store, post, github):
    result = invoke(["push", "-m", "New post", "-b", "drafts", "-path", "/x/hello.md", str(post)])

    assert result.exit_code == 0
    assert result.output.strip().endswith("success")
    [request] = github.requests
    assert request.url.path == "/repos/alice/blog/contents/x/hello.md"
    body = json.loads(request.content)
    assert body["message"] == "New post"
    assert body["branch"] == "drafts"
    assert "sha" not in body


def test_push_long_options(invoke, saved_store, post, github):
    result = invoke(["push", "--repo", "site", "--sha", "abc", str(post)])

    assert result.exit_code == 0
    [request] = github.requests
    assert request.url.path == "/repos/alice/site/contents/posts/hello.md"
    assert json.loads(request.content)["sha"] == "abc"


def test_push_flag_equals_value(invoke, saved_store, post, github):
    result = invoke(["push", "-b=dev", "-m=msg", "-r=site", "-path=/a.md", "-sha=abc", str(post)])

    assert result.exit_code == 0
    [request] = github.requests
    assert request.url.path == "/repos/alice/site/contents/a.md"
    assert json.loads(request.content) == {
        "message": "msg",
        "content": "IyBIZWxsbwo=",
        "sha": "abc",
        "branch": "dev",
    }


def test_push_flag_value_may_contain_equals(invoke, saved_store, post, github):
    result = invoke(["push", "-m=a=b", str(post)])

    assert result.exit_code == 0
    [request] = github.requests
    assert json.loads(request.content)["message"] == "a=b"


def test_push_failure_exits_1(invoke, saved_store, post, github):
    github.status_code = 404
    github.text = "Not Found"

    result = invoke(["push", str(post)])

    assert result.exit_code == 1
    assert "error received from github, Not Found" in result.output


def test_push_does_not_persist_overrides(invoke, saved_store, post, github):
    invoke(["push", "-t", "cli-token", "-r", "other", str(post)])

    stored = saved_store.read()
    assert stored.access_token == "stored-token"
    assert stored.repository == "blog"


def test_push_after_delete_prompts_once(invoke, saved_store, post, github):
    assert invoke(["config", "delete"]).exit_code == 0

    result = invoke(["push", str(post)], input=ANSWERS)

    assert result.exit_code == 0
    assert result.output.count("Github username") == 1
    [request] = github.requests
    assert request.url.path == "/repos/bob/notes/contents/hello.md"
