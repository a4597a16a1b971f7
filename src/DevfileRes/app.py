"""Streamlit UI for DevfileRes."""

from __future__ import annotations

import streamlit as st

from DevfileRes import config, token_store
from DevfileRes.clone import clone_git_repo
from DevfileRes.exceptions import (
    CloneError,
    DecodeError,
    FetchError,
    TokenValidationError,
    URLParseError,
)
from DevfileRes.fetcher import download_git_file, download_in_memory, is_git_provider_repo
from DevfileRes.file_filter import is_yaml_path, looks_like_devfile_path
from DevfileRes.git_url import GitUrl
from DevfileRes.kube_resources import parse_kubernetes_yaml, read_kubernetes_yaml
from DevfileRes.logging_utils import configure_logging
from DevfileRes.markdown_renderer import render_markdown
from DevfileRes.models import HTTPRequestParams, YamlSource
from DevfileRes.url_parser import parse_git_url


def _qp(key: str, default: str = "") -> str:
    """Read a query parameter, returning *default* if absent."""
    params = st.query_params
    return params.get(key, default)


def main() -> None:
    configure_logging()
    st.set_page_config(
        page_title="DevfileRes",
        page_icon="📦",
        layout="wide",
    )

    # --- Header with settings popover ---
    header_left, header_right = st.columns([8, 1])
    with header_left:
        st.title("DevfileRes")
    with header_right:
        st.markdown("<div style='height: 1.5rem'></div>", unsafe_allow_html=True)
        with st.popover("", use_container_width=True):
            st.subheader("Settings")
            token = st.text_input(
                "Access token (optional)",
                type="password",
                help=(
                    "GitHub, GitLab or Bitbucket token for private repositories. "
                    "Falls back to the keychain, then GITHUB_TOKEN / GITLAB_TOKEN / "
                    "BITBUCKET_TOKEN."
                ),
            )
            timeout = st.number_input(
                "Request timeout (s)",
                min_value=1.0,
                max_value=600.0,
                value=config.default_timeout(),
                step=5.0,
            )
            remember = False
            if token_store.is_available():
                remember = st.checkbox(
                    "Save validated tokens to OS keychain",
                    value=False,
                )

    st.caption(
        "Resolve a GitHub / GitLab / Bitbucket file or directory, fetch it, "
        "and classify the Kubernetes resources it contains."
    )

    url = st.text_input(
        "URL",
        value=_qp("url"),
        placeholder="https://github.com/owner/repo/blob/main/devfile.yaml",
    )

    col_resolve, col_fetch, col_clone = st.columns(3)
    with col_resolve:
        resolve_clicked = st.button("Resolve", use_container_width=True)
    with col_fetch:
        fetch_clicked = st.button("Fetch & classify", type="primary", use_container_width=True)
    with col_clone:
        clone_clicked = st.button("Clone", use_container_width=True)
    dest_dir = st.text_input("Clone destination (existing directory)", value=_qp("dest"))

    if (resolve_clicked or fetch_clicked or clone_clicked) and not url:
        st.error("Please enter a URL.")
        return

    url = url.strip()
    if resolve_clicked:
        _run_resolve(url, token, timeout, remember)
    elif fetch_clicked:
        _run_fetch(url, token, timeout, remember)
    elif clone_clicked:
        _run_clone(url, token, timeout, remember, dest_dir.strip())
    elif "result" in st.session_state:
        # Show previous result after rerun (e.g. download button click)
        _show_result(st.session_state["result"])


def _resolve(url: str, token: str, timeout: float, remember: bool) -> GitUrl | None:
    """Parse *url* and attach a token if one is available and accepted."""
    try:
        git_url = parse_git_url(url)
    except URLParseError as exc:
        st.error(f"Invalid URL: {exc}")
        return None

    candidate = config.resolve_token(git_url.host, token)
    if candidate:
        try:
            git_url.set_token(candidate, timeout)
        except TokenValidationError as exc:
            st.warning(str(exc))
            if candidate == token_store.load(git_url.host):
                # stale keychain entry
                token_store.delete(git_url.host)
        else:
            if remember:
                token_store.save(git_url.host, candidate)
    return git_url


def _run_resolve(url: str, token: str, timeout: float, remember: bool) -> None:
    with st.spinner("Resolving..."):
        git_url = _resolve(url, token, timeout, remember)
        if git_url is None:
            return
        public = git_url.is_public(timeout)

    if public:
        st.info("Repository is publicly readable.")
    elif not git_url.has_token:
        st.warning("Repository is not publicly readable; provide a token.")
    _store_result(render_markdown(url, git_url=git_url), git_url)


def _run_fetch(url: str, token: str, timeout: float, remember: bool) -> None:
    git_url = None
    try:
        with st.spinner("Downloading..."):
            if is_git_provider_repo(url):
                git_url = _resolve(url, token, timeout, remember)
                if git_url is None:
                    return
                data = download_git_file(git_url, timeout=timeout)
            else:
                data = download_in_memory(HTTPRequestParams(url=url, timeout=timeout))
    except (URLParseError, TokenValidationError, FetchError) as exc:
        st.error(str(exc))
        return

    text = data.decode("utf-8", errors="replace")
    resources = None
    path = git_url.path if git_url else url
    if is_yaml_path(path):
        try:
            documents = read_kubernetes_yaml(YamlSource(data=data))
            if looks_like_devfile_path(path):
                st.info("This is a devfile; Kubernetes classification skipped.")
            else:
                resources = parse_kubernetes_yaml(documents)
        except DecodeError as exc:
            st.error(str(exc))

    st.success(f"Downloaded {len(data):,} bytes.")
    _store_result(
        render_markdown(url, git_url=git_url, resources=resources, content=text),
        git_url,
    )


def _run_clone(
    url: str, token: str, timeout: float, remember: bool, dest_dir: str
) -> None:
    if not dest_dir:
        st.error("Please enter a destination directory.")
        return
    git_url = _resolve(url, token, timeout, remember)
    if git_url is None:
        return

    try:
        with st.spinner(f"Cloning {git_url.repo_url}..."):
            clone_git_repo(git_url, dest_dir)
    except CloneError as exc:
        st.error(str(exc))
        return
    st.success(f"Cloned {git_url.repo_url} into {dest_dir}.")


def _store_result(markdown_output: str, git_url: GitUrl | None) -> None:
    name = f"{git_url.owner}_{git_url.repo}" if git_url else "resource"
    st.session_state["result"] = {
        "markdown": markdown_output,
        "filename": f"{name}.md",
    }
    _show_result(st.session_state["result"])


def _show_result(result: dict) -> None:
    """Display download button and preview from a stored result."""
    st.download_button(
        label="Download report",
        data=result["markdown"],
        file_name=result["filename"],
        mime="text/markdown",
        use_container_width=True,
    )
    with st.expander("Preview", expanded=True):
        st.markdown(result["markdown"])


if __name__ == "__main__":
    main()
