from __future__ import annotations

import os
from pathlib import Path

import pytest

from astrocraft.config import ProjectLayout, ScaffoldRequest
from astrocraft.core.documents import ROUTE_IMPORT, RouteFile
from astrocraft.core.errors import DuplicateMethodError, MalformedFileError, ValidationError
from astrocraft.scaffold import ItemScaffolder, read_text, write_text_atomic


@pytest.fixture()
def messages() -> list[str]:
    return []


@pytest.fixture()
def scaffolder(project_root: Path, messages: list[str]) -> ItemScaffolder:
    return ItemScaffolder(ProjectLayout(project_root), reporter=messages.append)


def test_add_component_creates_file_and_directory(
    project_root: Path, scaffolder: ItemScaffolder, messages: list[str]
):
    path = scaffolder.add_component("UserCard")

    assert path == project_root / "src" / "components" / "user-card.astro"
    assert '<div class="user-card">' in path.read_text(encoding="utf-8")
    assert messages == [
        f"Directory created: {path.parent}",
        f"Component created: {path}",
    ]


def test_add_layout_uses_pascal_file_name(project_root: Path, scaffolder: ItemScaffolder):
    path = scaffolder.add_layout("main-layout")
    assert path == project_root / "src" / "layouts" / "MainLayout.astro"
    assert "<slot />" in path.read_text(encoding="utf-8")


def test_add_component_with_page_creates_then_updates_page(
    project_root: Path, scaffolder: ItemScaffolder, messages: list[str]
):
    scaffolder.add_component("Button", page="home")
    scaffolder.add_component("Card", page="home")

    page = (project_root / "src" / "pages" / "home.astro").read_text(encoding="utf-8")
    assert page == (
        "---\n"
        "import Card from '@components/card.astro';\n"
        "import Layout from '@layouts/Layout.astro';\n"
        "import Button from '@components/button.astro';\n"
        "---\n"
        "\n"
        "<Layout>\n"
        "  <h1>Home</h1>\n"
        "  <Button />\n"
        "  <Card />\n"
        "</Layout>\n"
    )
    assert messages[-1] == f"Page updated: {project_root / 'src' / 'pages' / 'home.astro'}"


def test_repeating_a_component_leaves_page_untouched(
    project_root: Path, scaffolder: ItemScaffolder, messages: list[str]
):
    scaffolder.add_component("Card", page="home")
    page_path = project_root / "src" / "pages" / "home.astro"
    before = page_path.read_text(encoding="utf-8")

    scaffolder.add_component("Card", page="home")

    assert page_path.read_text(encoding="utf-8") == before
    assert messages[-1] == f"Page already up to date: {page_path}"


def test_add_layout_wraps_existing_page(project_root: Path, scaffolder: ItemScaffolder):
    scaffolder.add_component("Card", page="about")
    scaffolder.add_layout("Shell", page="about")

    page = (project_root / "src" / "pages" / "about.astro").read_text(encoding="utf-8")
    assert page.startswith("---\nimport Shell from '@layouts/Shell.astro';\n")
    assert "<Layout>\n  <Shell>\n\n  <h1>About</h1>\n  <Card />\n  </Shell>\n</Layout>\n" in page


def test_update_page_reports_malformed_page(project_root: Path, scaffolder: ItemScaffolder):
    pages = project_root / "src" / "pages"
    pages.mkdir(parents=True)
    (pages / "broken.astro").write_text("<Layout></Layout>\n", encoding="utf-8")

    with pytest.raises(MalformedFileError) as excinfo:
        scaffolder.update_page("broken", "component", "Card")
    assert excinfo.value.path == pages / "broken.astro"
    assert (pages / "broken.astro").read_text(encoding="utf-8") == "<Layout></Layout>\n"


def test_add_route_creates_then_merges_methods(
    project_root: Path, scaffolder: ItemScaffolder, messages: list[str]
):
    path = scaffolder.add_route("UserAPI")
    assert path == project_root / "src" / "pages" / "api" / "user-api.ts"
    assert messages[-1] == f"API endpoint created: {path} with GET method"

    scaffolder.add_route("UserAPI", "post")
    text = path.read_text(encoding="utf-8")
    assert messages[-1] == f"API endpoint POST added to {path}"
    assert text.count(ROUTE_IMPORT) == 1
    assert RouteFile(text).methods == {"GET", "POST"}
    assert text.index("export const GET") < text.index("export const POST")


def test_add_route_rejects_duplicate_method(project_root: Path, scaffolder: ItemScaffolder):
    path = scaffolder.add_route("orders", "PUT")
    before = path.read_text(encoding="utf-8")

    with pytest.raises(DuplicateMethodError) as excinfo:
        scaffolder.add_route("orders", "PUT")

    assert excinfo.value.path == path
    assert path.read_text(encoding="utf-8") == before


def test_add_route_adds_import_to_hand_written_file(project_root: Path, scaffolder: ItemScaffolder):
    routes = project_root / "src" / "pages" / "api"
    routes.mkdir(parents=True)
    (routes / "health.ts").write_text("export const prerender = false;\n", encoding="utf-8")

    scaffolder.add_route("health", "HEAD")

    text = (routes / "health.ts").read_text(encoding="utf-8")
    assert text.startswith(f"{ROUTE_IMPORT}\nexport const prerender = false;\n\nexport const HEAD")


def test_run_stops_at_first_failure_and_keeps_earlier_items(project_root: Path, scaffolder: ItemScaffolder):
    scaffolder.add_route("beta", "POST")
    request = ScaffoldRequest.from_args("add-api", ["alpha", "beta", "gamma"], method="POST")

    with pytest.raises(DuplicateMethodError):
        scaffolder.run(request)

    routes = project_root / "src" / "pages" / "api"
    assert (routes / "alpha.ts").exists()
    assert not (routes / "gamma.ts").exists()


def test_run_creates_every_item(project_root: Path, scaffolder: ItemScaffolder):
    request = ScaffoldRequest.from_args("-c", ["Button", "Card"], page="home")
    created = scaffolder.run(request)

    assert [path.name for path in created] == ["button.astro", "card.astro"]
    page = (project_root / "src" / "pages" / "home.astro").read_text(encoding="utf-8")
    assert "<Button />" in page and "<Card />" in page


def test_write_text_atomic_preserves_line_endings(tmp_path: Path):
    target = tmp_path / "page.astro"
    write_text_atomic(target, "---\r\n---\r\n")
    assert target.read_bytes() == b"---\r\n---\r\n"
    assert read_text(target) == "---\r\n---\r\n"
    assert [path.name for path in tmp_path.iterdir()] == ["page.astro"]


def test_invalid_name_leaves_existing_page_untouched(project_root: Path, scaffolder: ItemScaffolder):
    scaffolder.add_component("Button", page="home")
    page_path = project_root / "src" / "pages" / "home.astro"
    before = page_path.read_text(encoding="utf-8")

    with pytest.raises(ValidationError):
        scaffolder.add_component("-", page="home")

    assert page_path.read_text(encoding="utf-8") == before
    assert not (project_root / "src" / "components" / "-.astro").exists()


def test_undecodable_page_is_reported_as_malformed(project_root: Path, scaffolder: ItemScaffolder):
    pages = project_root / "src" / "pages"
    pages.mkdir(parents=True)
    (pages / "home.astro").write_bytes(b"---\n---\n<Layout>\xff</Layout>\n")

    with pytest.raises(MalformedFileError) as excinfo:
        scaffolder.update_page("home", "component", "Card")
    assert excinfo.value.path == pages / "home.astro"


def test_write_text_atomic_respects_umask_for_new_files(tmp_path: Path):
    previous = os.umask(0o027)
    try:
        write_text_atomic(tmp_path / "card.astro", "---\n---\n")
    finally:
        os.umask(previous)
    assert (tmp_path / "card.astro").stat().st_mode & 0o777 == 0o640


def test_write_text_atomic_keeps_existing_mode(tmp_path: Path):
    target = tmp_path / "card.astro"
    target.write_text("old", encoding="utf-8")
    target.chmod(0o600)
    write_text_atomic(target, "new")
    assert target.stat().st_mode & 0o777 == 0o600
    assert target.read_text(encoding="utf-8") == "new"
