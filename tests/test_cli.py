import json
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from swagger_interfaces.cli import main
from swagger_interfaces.errors import DocumentError

FIXTURES = Path(__file__).parent / "fixtures"


class TestCliGenerate:
    def test_generate_from_file(self, tmp_path):
        output_file = tmp_path / "out" / "Swagger.ts"
        runner = CliRunner()
        result = runner.invoke(main, [
            "generate",
            "--source", str(FIXTURES / "petstore.json"),
            "-o", str(output_file),
        ])

        assert result.exit_code == 0
        assert "Found 2 operations" in result.output
        assert output_file.exists()
        content = output_file.read_text(encoding="utf-8")
        assert content.startswith("import {Map, List} from 'immutable'\n\n")
        assert "export interface ListPets {" in content

    def test_generate_default_output_under_root(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, [
            "generate",
            "--source", str(FIXTURES / "petstore.yaml"),
            "--root", str(tmp_path),
        ])

        assert result.exit_code == 0
        output_file = tmp_path / "front-end" / "interfaces" / "Swagger.ts"
        assert "export interface ListStores {" in output_file.read_text(encoding="utf-8")

    @patch("swagger_interfaces.cli.load_document")
    def test_generate_fetches_configured_url(self, mock_load, tmp_path):
        (tmp_path / "client.json").write_text(
            json.dumps({"baseURL": "https://api.example.com", "apiKey": "secret"}),
            encoding="utf-8",
        )
        mock_load.return_value = {"paths": {}}

        runner = CliRunner()
        result = runner.invoke(main, ["generate", "--root", str(tmp_path)])

        assert result.exit_code == 0
        mock_load.assert_called_once_with(
            "https://api.example.com/swagger/docs/v1?flatten=true", api_key="secret",
        )

    @patch("swagger_interfaces.cli.load_document")
    def test_source_uses_api_key_from_config(self, mock_load, tmp_path):
        mock_load.return_value = {"paths": {}}

        runner = CliRunner()
        result = runner.invoke(main, [
            "generate",
            "--source", "http://localhost/swagger.json",
            "--config", str(FIXTURES / "client.json"),
            "-o", str(tmp_path / "Swagger.ts"),
        ])

        assert result.exit_code == 0
        mock_load.assert_called_once_with("http://localhost/swagger.json", api_key="secret")

    def test_missing_config_fails(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["generate", "--root", str(tmp_path)])

        assert result.exit_code != 0
        assert "client.json" in result.output

    @patch("swagger_interfaces.cli.load_document")
    def test_document_error_fails(self, mock_load, tmp_path):
        mock_load.side_effect = DocumentError("http://x returned 500")

        runner = CliRunner()
        result = runner.invoke(main, [
            "generate", "--source", "http://x", "-o", str(tmp_path / "Swagger.ts"),
        ])

        assert result.exit_code == 1
        assert "returned 500" in result.output
        assert not (tmp_path / "Swagger.ts").exists()

    def test_collision_is_reported_not_fatal(self, tmp_path):
        doc = {
            "paths": {
                "/a": {"get": {"operationId": "get_user", "responses": {"200": {"schema": {"properties": {"a": {"type": "string"}}}}}}},
                "/b": {"get": {"operationId": "getUser", "responses": {"200": {"schema": {"properties": {"b": {"type": "string"}}}}}}},
            }
        }
        source = tmp_path / "swagger.json"
        source.write_text(json.dumps(doc), encoding="utf-8")
        output_file = tmp_path / "Swagger.ts"

        runner = CliRunner()
        result = runner.invoke(main, ["generate", "--source", str(source), "-o", str(output_file)])

        assert result.exit_code == 0
        assert "Warning: GetUser" in result.output
        assert "b: string" in output_file.read_text(encoding="utf-8")


class TestCliInspect:
    def test_inspect_lists_operations(self):
        runner = CliRunner()
        result = runner.invoke(main, ["inspect", "--source", str(FIXTURES / "petstore.json")])

        assert result.exit_code == 0
        assert "Found 3 operations." in result.output
        assert "[collection]  ListPets" in result.output
        assert "[object]  GetPetById" in result.output
        assert "[none]  UploadPhoto" in result.output
