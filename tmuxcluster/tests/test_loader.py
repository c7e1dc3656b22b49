import pytest
from tmuxcluster.modules import loader
from tmuxcluster.modules.errors import ArgConflictError, ConfigMissingError, NameCollisionError
from tmuxcluster.registry import Registry

def write_config(path, clusters="", tags=""):
    path.mkdir(exist_ok=True)
    (path / "clusters").write_text(clusters)
    (path / "tags").write_text(tags)
    return path

def test_parse_line_skips_blank_and_comments():
    assert loader.parse_line("") is None
    assert loader.parse_line("   \n") is None
    assert loader.parse_line("# comment") is None
    assert loader.parse_line("    # indented comment") is None
    assert loader.parse_line("web  web1\tweb2\n") == ("web", ["web1", "web2"])

def test_repeated_cluster_lines_accumulate(tmp_path):
    config_dir = write_config(tmp_path / "conf", clusters="web web1 web2\nweb web3\n")
    registry = loader.load_registry(config_dir)
    assert registry.members_of(registry.lookup_id("web")) == ["web1", "web2", "web3"]

def test_tags_collect_hosts_across_lines(tmp_path):
    config_dir = write_config(
        tmp_path / "conf",
        tags="web1 prod frontend\nweb2 frontend\n# db1 prod\ndb1 prod\nlonely\n",
    )
    registry = loader.load_registry(config_dir)
    assert registry.members_of(registry.lookup_id("prod")) == ["web1", "db1"]
    assert registry.members_of(registry.lookup_id("frontend")) == ["web1", "web2"]
    assert "lonely" not in registry

def test_clusters_and_tags_share_a_namespace(tmp_path):
    config_dir = write_config(tmp_path / "conf", clusters="prod db1\n", tags="web1 prod\n")
    registry = loader.load_registry(config_dir)
    assert registry.names() == ["prod"]
    assert registry.members_of(registry.lookup_id("prod")) == ["db1", "web1"]

def test_missing_files_are_empty(tmp_path):
    config_dir = tmp_path / "conf"
    config_dir.mkdir()
    registry = loader.load_registry(config_dir)
    assert len(registry) == 0
    assert registry.frozen

def test_cluster_line_without_config_dir(tmp_path):
    registry = loader.load_registry(tmp_path / "absent", cluster_line="adhoc h1 h2")
    assert registry.members_of(registry.lookup_id("adhoc")) == ["h1", "h2"]

def test_missing_config_dir_without_cluster_line(tmp_path):
    with pytest.raises(ConfigMissingError):
        loader.load_registry(tmp_path / "absent")

def test_cluster_line_name_collision(tmp_path):
    config_dir = write_config(tmp_path / "conf", clusters="web web1\n", tags="db1 db\n")
    with pytest.raises(NameCollisionError) as excinfo:
        loader.load_registry(config_dir, cluster_line="web other1")
    assert excinfo.value.name == "web"
    with pytest.raises(NameCollisionError):
        loader.load_registry(config_dir, cluster_line="db other1")

def test_blank_cluster_line_is_rejected():
    with pytest.raises(ArgConflictError):
        loader.add_cluster_line(Registry(), "   ")

def test_undecodable_file_is_a_config_error(tmp_path):
    config_dir = tmp_path / "conf"
    config_dir.mkdir()
    (config_dir / "clusters").write_bytes(b"web web1 caf\xe9\n")
    with pytest.raises(ConfigMissingError) as excinfo:
        loader.load_registry(config_dir)
    assert "Cannot read" in str(excinfo.value)
