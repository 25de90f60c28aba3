"""PR 설명 API 엔드포인트 테스트"""

import pytest

from conftest import SAMPLE_DIFF
from prdraft.api.v1.schemas import BufferResponse, GenerateRequest
from prdraft.domain.description.buffers import DESCRIPTION_HEADER
from prdraft.domain.description.rationale import RATIONALE_HEADER
from prdraft.domain.description.schemas import BackendResponse


class TestBufferEndpoints:
    """버퍼 API 테스트"""

    @pytest.mark.asyncio
    async def test_write_read_close(self, async_client, service_dispatcher):
        """버퍼 저장, 조회, 닫기"""
        async with async_client as client:
            put = await client.put("/api/v1/descriptions/buffers/b1", json={"content": "## T"})
            get = await client.get("/api/v1/descriptions/buffers/b1")
            delete = await client.delete("/api/v1/descriptions/buffers/b1")
            missing = await client.get("/api/v1/descriptions/buffers/b1")

        assert put.status_code == 200
        assert put.json() == {"bufferId": "b1", "content": "## T"}
        assert get.json()["content"] == "## T"
        assert delete.status_code == 204
        assert missing.status_code == 404
        assert missing.json()["error_code"] == "BUFFER_NOT_FOUND"


class TestGenerateEndpoint:
    """생성 API 테스트"""

    @pytest.mark.asyncio
    async def test_generate_uses_buffer_template(self, async_client, service_dispatcher):
        """버퍼 내용을 템플릿으로 사용하고 결과로 교체"""
        async with async_client as client:
            await client.put(
                "/api/v1/descriptions/buffers/b1",
                json={"content": "# note\n## Summary\n"},
            )
            response = await client.post(
                "/api/v1/descriptions/buffers/b1/generate",
                json={"sourceBranch": "feature", "targetBranch": "main"},
            )

        assert response.status_code == 200
        assert response.json()["content"] == DESCRIPTION_HEADER + "generated description"

    @pytest.mark.asyncio
    async def test_missing_branch(self, async_client, service_dispatcher):
        """브랜치 누락은 400"""
        async with async_client as client:
            await client.put("/api/v1/descriptions/buffers/b1", json={"content": ""})
            response = await client.post(
                "/api/v1/descriptions/buffers/b1/generate",
                json={"sourceBranch": "feature"},
            )

        assert response.status_code == 400
        assert response.json()["error_code"] == "MISSING_BRANCH"

    @pytest.mark.asyncio
    async def test_no_diff(self, async_client, service_dispatcher, vcs_diff):
        """diff가 없으면 422"""
        vcs_diff.return_value = ""

        async with async_client as client:
            await client.put("/api/v1/descriptions/buffers/b1", json={"content": "draft"})
            response = await client.post(
                "/api/v1/descriptions/buffers/b1/generate",
                json={"sourceBranch": "feature", "targetBranch": "main"},
            )
            buffer = await client.get("/api/v1/descriptions/buffers/b1")

        assert response.status_code == 422
        assert response.json()["error_code"] == "NO_DIFF"
        assert buffer.json()["content"] == "draft"

    @pytest.mark.asyncio
    async def test_backend_error(self, async_client, service_dispatcher, stub_backend):
        """백엔드 오류는 502, 버퍼는 그대로"""
        stub_backend.response = BackendResponse(error={"message": "quota exceeded"})

        async with async_client as client:
            await client.put("/api/v1/descriptions/buffers/b1", json={"content": "draft"})
            response = await client.post(
                "/api/v1/descriptions/buffers/b1/generate",
                json={"sourceBranch": "feature", "targetBranch": "main"},
            )
            buffer = await client.get("/api/v1/descriptions/buffers/b1")

        assert response.status_code == 502
        assert response.json()["error_code"] == "BACKEND_ERROR"
        assert response.json()["detail"] == "quota exceeded"
        assert buffer.json()["content"] == "draft"

    @pytest.mark.asyncio
    async def test_unknown_buffer(self, async_client, service_dispatcher):
        """없는 버퍼"""
        async with async_client as client:
            response = await client.post(
                "/api/v1/descriptions/buffers/nope/generate",
                json={"sourceBranch": "feature", "targetBranch": "main"},
            )

        assert response.status_code == 404


class TestRationaleEndpoints:
    """변경 이유 세션 API 테스트"""

    @pytest.mark.asyncio
    async def test_open_edit_submit(self, async_client, service_dispatcher, stub_backend):
        """세션 시작 → 입력 → 제출"""
        stub_backend.echo = True

        async with async_client as client:
            await client.put("/api/v1/descriptions/buffers/b1", json={"content": ""})
            opened = await client.post(
                "/api/v1/rationale/open",
                json={"bufferId": "b1", "sourceBranch": "feature", "targetBranch": "main"},
            )
            edited = await client.put("/api/v1/rationale", json={"content": "fix crash"})
            submitted = await client.post("/api/v1/rationale/submit", json={})
            after = await client.get("/api/v1/rationale")

        assert opened.status_code == 200
        assert opened.json()["text"] == RATIONALE_HEADER
        assert edited.json()["text"] == RATIONALE_HEADER + "fix crash"
        assert submitted.status_code == 200
        assert submitted.json()["content"] == (
            DESCRIPTION_HEADER
            + f"Why these changes were made: fix crash\n\nCode changes:\n{SAMPLE_DIFF}"
        )
        assert after.status_code == 404

    @pytest.mark.asyncio
    async def test_cancel(self, async_client, service_dispatcher, stub_backend):
        """취소 후 세션 없음, 생성 호출 없음"""
        async with async_client as client:
            await client.put("/api/v1/descriptions/buffers/b1", json={"content": "draft"})
            await client.post(
                "/api/v1/rationale/open",
                json={"bufferId": "b1", "sourceBranch": "feature", "targetBranch": "main"},
            )
            cancelled = await client.delete("/api/v1/rationale")
            again = await client.delete("/api/v1/rationale")
            buffer = await client.get("/api/v1/descriptions/buffers/b1")

        assert cancelled.status_code == 204
        assert again.status_code == 404
        assert again.json()["error_code"] == "RATIONALE_SESSION_NOT_FOUND"
        assert stub_backend.calls == []
        assert buffer.json()["content"] == "draft"

    @pytest.mark.asyncio
    async def test_submit_after_buffer_closed(self, async_client, service_dispatcher, stub_backend):
        """세션 시작 후 버퍼를 닫으면 제출은 404, 생성 호출 없음"""
        async with async_client as client:
            await client.put("/api/v1/descriptions/buffers/b1", json={"content": ""})
            await client.post(
                "/api/v1/rationale/open",
                json={"bufferId": "b1", "sourceBranch": "feature", "targetBranch": "main"},
            )
            await client.delete("/api/v1/descriptions/buffers/b1")
            submitted = await client.post("/api/v1/rationale/submit", json={"content": "why"})

        assert submitted.status_code == 404
        assert submitted.json()["error_code"] == "BUFFER_NOT_FOUND"
        assert stub_backend.calls == []


class TestSchemas:
    """API 스키마 테스트"""

    def test_populate_by_field_name(self):
        """필드 이름으로 생성하고 alias로 직렬화"""
        response = BufferResponse(buffer_id="b1", content="text")

        assert response.model_dump(by_alias=True) == {"bufferId": "b1", "content": "text"}

    def test_request_accepts_alias_and_name(self):
        """요청은 camelCase alias와 필드 이름 모두 허용"""
        by_alias = GenerateRequest.model_validate({"sourceBranch": "f", "targetBranch": "m"})
        by_name = GenerateRequest(source_branch="f", target_branch="m")

        assert by_alias == by_name
