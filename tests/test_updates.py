from gooberbot.updates import REPOSITORY_URL, Commit, commits_string, updates_description


def _commit(n):
    return Commit(f"{n:040x}", 1700000000 - n, f"Change {n}\n\nLonger body")


def test_no_commits():
    assert commits_string([]) == ""


def test_first_commit_gives_time():
    commit = _commit(1)
    text = commits_string([commit])
    assert text.startswith(f"The last change was <t:{commit.time}:R>.\n")
    assert f"[`{commit.id[:7]}`]({REPOSITORY_URL}/commit/{commit.id}): Change 1" in text
    assert "Longer body" not in text


def test_at_most_ten_commits():
    commits = [_commit(n) for n in range(12)]
    text = commits_string(commits)
    assert text.count("\n[`") == 10
    assert "Change 9" in text
    assert "Change 10" not in text


def test_empty_message():
    assert commits_string([Commit("a" * 40, 5, "")]).endswith(": ")


def test_description():
    commits = [_commit(1)]
    text = updates_description(commits)
    assert text.startswith(commits_string(commits) + "\n. . .\n\n")
    assert text.endswith("for more!")