# cinder

The building blocks of a static site generator. It turns documents with
front matter into pages with URLs and output file paths, loads site data
files, walks a source tree with gitignore-style patterns, and paginates
posts into index pages.

## Install

```
pip install .
```

## Modules

### `cinder.model.slug`

- `slugify(name)` makes a lower-case, URL-safe slug. Non-ASCII text is
  transliterated first, and each run of other characters becomes one `-`.
- `titleize_slug(slug)` splits a slug on `-` and title-cases each word.

### `cinder.model.files`

- `FilesBuilder(root_dir)` has `add_ignore(line)`, `ignore_hidden(ignore)`,
  `limit(subtree)` and `add_extension(ext)`. Each of these returns the
  builder, so calls can be chained. `build()` returns a `Files`.
  Entries starting with `.` or `_` are ignored unless `ignore_hidden(False)`
  is set. Ignore lines use gitignore syntax, and `!pattern` re-includes.
- `Files` has `root()`, `subtree()`, `includes_file(file)`,
  `includes_dir(dir)` and `files()`. `files()` is also used for iteration.
  It yields the included files, walking directories in file-name order
  without following symlinks.
- Helpers:
  - `find_project_file(dir, name)` searches `dir` and its parents.
  - `cleanup_path(path)` strips leading `./`.
  - `read_file(path)` reads UTF-8 text and normalises line endings.
  - `copy_file(src_file, dest_file)` and `write_document_file(content, dest_file)`
    create the directories they need.

### `cinder.model.permalink`

- `explode_permalink(permalink, attributes)` substitutes `{{ name }}` and
  `{{ a.b }}` expressions from `attributes`. It then turns `\` into `/`,
  collapses `//`, and drops a leading `/`. An unknown variable, a `{% %}`
  tag or any other expression raises `ValueError`.
- `format_url_as_file(permalink)` maps a URL path to the relative file that
  is written for it. A URL whose last segment has no extension becomes a
  directory holding `index.html`.

### `cinder.model.frontmatter`

- `Frontmatter.from_config(mapping)` checks the front matter and applies
  defaults:
  - permalink `/{{parent}}/{{name}}{{ext}}`
  - excerpt separator `"\n\n"`
  - templated `True`
  - format `SourceFormat.RAW`

  It raises `ValueError` in these cases:
  - the slug or the title is missing
  - a field is unknown
  - a tag is empty
  - the pagination `date_index` is out of order
- `str(front)` gives the front matter as YAML.

### `cinder.model.pagination_config`

- `PaginationConfig.from_config(mapping, permalink)` returns `None` when
  `include` is `None` or absent. Otherwise it applies these defaults:
  - 10 posts per page
  - suffix `./{{num}}/`
  - descending order
  - sort by `weight`, then `published_date`
  - date index of year, then month
- `Include`, `SortOrder` and `DateIndex` are the enums it uses.
- `is_date_index_sorted(v)` checks that the date fields run from coarsest
  to finest.

### `cinder.model.site`

- `Site.from_config(mapping)` strips a trailing `/` from `base_url`.
- `Site.load(source)` returns the site attributes: title, description,
  base_url, the build `time` and `data`. The `data` attribute merges the
  configured data with every `.yml`, `.yaml`, `.json` and `.toml` file
  under `source/<data_dir>` (default `_data`). Data is nested by directory
  and keyed by file stem. Duplicate keys raise `ValueError`.

### `cinder.document`

- `Document.create(content, rel_path, front)` works out the document's URL
  path, output file path and template attributes.
- `Document.description_to_str()` returns the description. Without one, it
  returns the `excerpt` attribute, or else the `content` attribute.
- `Document.to_jsonfeed(root_url)` returns a JSON Feed item as a dict.
- `permalink_attributes(front, dest_file)` returns the values a permalink
  can use:
  - `parent`, `name`, `ext`, `slug`, `categories`
  - `year`, `month`, `i_month`, `day`, `i_day`, `hour`, `minute`, `second`
  - `data`
- `document_attributes(front, source_file, url_path)` returns the
  attributes of the document itself.
- `extract_excerpt(content, format, excerpt_separator)` returns the text
  before the separator. Markdown excerpts also keep the document's link
  reference definitions.

### `cinder.pagination`

- `generate.generate_paginators(doc, posts_data)` builds the paginators of a
  document whose front matter has pagination. Posts are plain mappings. They
  are either all listed together, or grouped by tags, categories or
  publication dates.
- `paginator.Paginator` is one index page. `Paginator.to_object()` gives its
  template-facing dict:
  - `pages`, `indexes`, `index`, `index_title`
  - the permalinks of the current, previous, next, first and last indexes
  - `total_indexes`, `total_pages`
- Grouping and sorting are done by these lower-level pieces:
  - `paginator.create_all_paginators`, `paginator.create_paginator`
  - `tags.create_tags_paginators`
  - `categories.create_categories_paginators`
  - `dates.create_dates_paginators`
  - `core.sort_posts`, `core.interpret_permalink`, `core.index_to_string`
  - `helpers.extract_scalar`, `helpers.extract_tags`, `helpers.extract_categories`

## Example

```python
from cinder.model.slug import slugify, titleize_slug
from cinder.model.permalink import explode_permalink, format_url_as_file

slugify("___filE-worldD-__09___")         # "file-worldd-09"
titleize_slug("tItLeIzE-sLuG")            # "Titleize Slug"

url = explode_permalink("/{{ parent }}/{{ name }}", {"parent": "blog", "name": "post"})
format_url_as_file(url)                   # "blog/post/index.html"
```

## What it does not do

This is a library, not a site builder. It has no command line, no
development server and no file watching. It does not read a site
configuration file or parse front matter out of document files; front
matter arrives as a mapping. It does not render templates: permalinks
support only variable substitution, with no tags or filters. It does not
convert Markdown, highlight code, compile Sass, minify output, or write
RSS feeds or sitemaps.

## Tests

```
pip install .[test]
pytest
```