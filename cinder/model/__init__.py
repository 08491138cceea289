"""Site model: slugs, files, permalinks, front matter, pagination settings and site data."""