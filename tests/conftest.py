"""Shared fixtures for portfolio assistant tests."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from chatbot.chat.client import CompletionError
from config import Config
from knowledge.profile_loader import parse_knowledge_base

PROFILE = {
    "personal_info": {
        "name": "Alex Morgan",
        "title": "Data Scientist",
        "email": "alex@example.com",
        "linkedin": "https://www.linkedin.com/in/alex-example",
        "github": "https://github.com/alex-example",
    },
    "professional_summary": "Builds medical imaging and NLP systems.",
    "projects": [
        {
            "title": "Mammography Lesion Detection",
            "description": "Detects lesions in screening mammograms.",
            "keywords": ["Healthcare", "mammography"],
            "technologies": ["PyTorch", "GroundingDINO"],
            "achievements": ["15% mAP improvement", "Handled class imbalance"],
        },
        {
            "title": "Chest X-ray Classifier",
            "description": "Classifies pathologies on chest radiographs.",
            "keywords": ["healthcare", "radiology"],
            "technologies": ["DINOv2", "ONNX"],
            "achievements": ["Trained with 10% of the labels"],
        },
        {
            "title": "Clinical Notes Summarizer",
            "description": "Summarizes discharge notes for clinicians.",
            "keywords": ["healthcare", "nlp"],
            "technologies": ["Llama 3"],
            "achievements": ["Saved clinicians an hour per shift"],
        },
        {
            "title": "Retail Shelf Monitoring",
            "description": "Real-time product detection on store shelves.",
            "keywords": ["retail", "yolo"],
            "technologies": ["YOLOv8", "TensorRT"],
            "achievements": ["Runs at 30 FPS on an edge GPU"],
        },
    ],
    "blog_posts": [
        {
            "title": "Vision Transformers Explained",
            "url": "https://blog.example.com/vit",
            "topics": ["vision transformers", "computer vision"],
            "summary": "Patches, attention and positional embeddings.",
        },
        {
            "title": "Fine-Tuning Llama 3",
            "url": "https://blog.example.com/llama",
            "topics": ["llm", "lora"],
            "summary": "Parameter-efficient adapters on one GPU.",
        },
        {
            "title": "RAG Pipelines",
            "url": "https://blog.example.com/rag",
            "topics": ["rag", "llm"],
            "summary": "Chunking and retrieval choices.",
        },
        {
            "title": "Serving Models at the Edge",
            "url": "https://blog.example.com/edge",
            "topics": ["llm", "tensorrt"],
            "summary": "Quantization for small devices.",
        },
    ],
    "skills": {
        "Computer Vision": {"technologies": ["Object Detection", "Medical Imaging"]},
        "MLOps": {"technologies": ["ONNX", "Docker"]},
        "Soft Skills": {},
    },
    "experience": [
        {
            "title": "Data Scientist",
            "company": "Northwind Health",
            "duration": "2023 - Present",
            "description": "Medical imaging models for screening.",
        },
    ],
}


class FakeRelayClient:
    """Stands in for RelayClient, recording every prompt it receives."""

    def __init__(self, reply: str = "Happy to help!", error: Exception = None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def complete(self, messages, model, max_tokens, temperature):
        self.calls.append({
            "messages": messages,
            "model": model,
            "max_tokens": max_tokens,
            "temperature": temperature,
        })
        if self.error:
            raise self.error
        return self.reply


@pytest.fixture
def config():
    """Create test configuration."""
    return Config()


@pytest.fixture
def knowledge_base():
    """Knowledge base with four projects and four blog posts."""
    return parse_knowledge_base(PROFILE)


@pytest.fixture
def relay_client():
    """Relay client that always succeeds."""
    return FakeRelayClient()


@pytest.fixture
def failing_relay_client():
    """Relay client that always fails."""
    return FakeRelayClient(error=CompletionError("Relay returned status 500"))
