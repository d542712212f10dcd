from __future__ import annotations

from pathlib import Path

from . import git, github
from .models import RepositoryTarget
from .prompts import Prompter


class SetupCancelled(RuntimeError):
    pass


def _github_target(repo: Path, prompter: Prompter, *, default_private: bool) -> RepositoryTarget:
    while True:
        name = prompter.text(
            "Enter a name for your new GitHub repository",
            default=repo.name,
            validate=lambda v: None if v.strip() else "Please enter a repository name",
        )
        private = prompter.confirm("Should the repository be private?", default=default_private)

        if github.repo_exists(name, cwd=repo):
            print(f"Repository {name} already exists. Using the existing repository.")
            return RepositoryTarget(url=github.repo_clone_url(name, cwd=repo), source="github", private=private)

        print(f"Creating GitHub repository: {name} ({'private' if private else 'public'})...")
        try:
            out = github.create_repo(name, private=private, cwd=repo)
        except github.RepoNameTaken:
            print("A repository with that name already exists. Please try a different name.")
            if prompter.assume_defaults or not prompter.confirm("Try a different name?", default=True):
                raise SetupCancelled(f"GitHub repository name {name!r} is taken")
            continue
        if out:
            print(out)
        print(f"Created GitHub repository: {name}")
        return RepositoryTarget(url=github.repo_clone_url(name, cwd=repo), source="github", private=private)


def _manual_target(prompter: Prompter) -> RepositoryTarget:
    url = prompter.text(
        "Enter your GitHub repository URL (e.g., https://github.com/username/repo)",
        validate=github.validate_repo_url,
        normalize=github.normalize_repo_url,
    )
    return RepositoryTarget(url=url, source="manual")


def setup_repository(repo: Path, prompter: Prompter, *, default_private: bool = True) -> RepositoryTarget:
    """
    Make sure `repo` is a git repository whose `origin` points at GitHub.

    An existing origin is adopted as-is. Otherwise the GitHub CLI is used to
    find or create the repository when it is installed and logged in, and the
    user is asked for a URL when it is not.
    """
    in_repo = git.is_git_repo(repo)
    origin = git.get_remote_origin(repo) if in_repo else ""

    if origin:
        print("Git repository with origin already exists.")
        print(f"Using existing origin: {origin}")
        return RepositoryTarget(url=origin, source="existing")

    available = github.gh_available(repo)
    authenticated = available and github.gh_authenticated(repo)

    if authenticated:
        print("GitHub CLI detected and authenticated!")
        target = _github_target(repo, prompter, default_private=default_private)
    else:
        if available:
            print(
                'GitHub CLI detected but not authenticated. Run "gh auth login" separately and try again, '
                "or create a GitHub repository and enter its URL."
            )
        else:
            print("GitHub CLI not detected. Using manual repository URL entry.")
        target = _manual_target(prompter)

    if not in_repo:
        print(f"Initializing git repository in {repo}...")
        git.init_repo(repo)

    print("Adding GitHub remote repository...")
    git.attach_origin(repo, target.url, replace=in_repo and git.has_origin(repo))
    print("Git repository initialized successfully!")
    print(f"GitHub remote added: {target.url}")
    return target
