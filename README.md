# reposcan

Scan one or more root directories for Git repositories and report which ones
have uncommitted files, or commits that are ahead of or behind their remotes.

## Installation

```
pip install .
```

`git` must be available on your `PATH`; every repository is inspected by
running `git` commands.

## Usage

Scan with the settings from your configuration file:

```
reposcan
```

Print the report as JSON, including only repositories with uncommitted files:

```
reposcan -o json -f uncommitted
```

Scan specific roots, ignore some directories, and also save the report to a
directory:

```
reposcan -r ~/code -r ~/work -d "**/node_modules/**" --json-output-path ~/reports
```

Show the version:

```
reposcan version
```

### Options

| Option | Meaning |
| --- | --- |
| `-r`, `--root` | Root directory to scan (repeatable); replaces the configured roots |
| `-d`, `--dirIgnore` | Glob pattern to ignore during the scan (repeatable); replaces the configured patterns |
| `-o`, `--output` | Output format: `json`, `interactive` (or `table`) or `none` |
| `-f`, `--filter` | Repository filter: `all`, `dirty`, `uncommitted`, `unpushed`, `unpulled` |
| `--json-output-path` | Directory where a JSON report named `ScanReport YYYY-MM-DD HH-MM-SS.json` is written |
| `-w`, `--max-workers` | Number of repositories checked at the same time |
| `--debug` | Enable debug logging; `--debug false` disables it |

Output format and filter values are matched case-insensitively. The
`interactive` format prints a summary, a table of repositories and the list of
uncommitted files of each dirty repository; `json` prints the whole report as
indented JSON; `none` prints nothing.

Filters:

- `all` – every repository found.
- `dirty` – uncommitted files, or ahead/behind any remote.
- `uncommitted` – uncommitted files.
- `unpushed` – ahead of at least one remote.
- `unpulled` – behind at least one remote.

The command exits with status 1 when any reported repository has uncommitted
files, or when the configuration or the options are invalid, which makes it
usable in scripts.

## Configuration

On first run a configuration file is created at
`~/.config/reposcan/config.toml` with defaults: your home directory as the
root, a list of common ignore patterns (`node_modules`, build output, caches,
IDE folders, system directories), the `dirty` filter, `interactive` output and
eight workers. Command-line options override the file.

```toml
roots = ["/home/me/code"]
dirignore = ["**/node_modules/**", "/archive/**"]
only = "dirty"
maxWorkers = 8
debug = false
version = 1

[output]
type = "interactive"
jsonPath = ""
colorscheme = ""
```

Roots may contain `$VAR` or `${VAR}` environment references. A root that does
not exist is an error; a `jsonPath` that does not exist, or a `colorscheme`
that is not one of the bundled scheme names, is a warning.

Debug logs, when enabled, are appended to a file named after the current date
in `~/.config/reposcan/logs/`.

## Ignore patterns

- `**` matches any number of path segments; `*`, `?`, `[...]` and `{a,b}` work
  within a segment.
- `**/name/**` matches a directory anywhere, including the directory itself.
- Patterns starting with `/` are anchored to each scan root.
- A bare name such as `cache` becomes `**/cache/**`.
- A trailing slash (`cache/`) makes the pattern recursive.
- Empty lines and patterns starting with `#` are skipped.

A directory that holds a `.git` directory, or a `.git` file containing
`gitdir:`, is reported as a repository, and the scan does not descend into it.

## Using it as a library

```python
from reposcan.config import defaults
from reposcan.generator import generate_scan_report

report = generate_scan_report(defaults())
print(report.to_json())
print(report.dirty_repos_count())
```

Other useful pieces:

- `reposcan.scanner.find_git_repos(roots, dir_ignore)` returns the repository
  paths and any warnings.
- `reposcan.repostate.check_repo_state(path)` returns a `RepoState` and
  warnings for one repository.
- `reposcan.ignore.IgnoreMatcher(roots, patterns).should_ignore(path)` and
  `reposcan.ignore.path_match(pattern, path)` apply the ignore rules.
- `reposcan.git` wraps individual `git` commands (`get_repo_branch`,
  `get_uncommitted_files`, `get_remote_status`, `git_fetch`, `git_pull`,
  `git_push`, ...) and raises `GitError` when one fails.
- `reposcan.reportfile.write_scan_report(report, directory)` saves a report.

## What it does not do

- There is no full-screen, keyboard-driven view: `interactive` output is a
  printed table, and the `colorscheme` setting is only checked, not used.
- The command line only reports; it never fetches, pulls or pushes. The
  `git_fetch`, `git_pull` and `git_push` functions are available to library
  users only.