"""
Centralized configuration for LLM Prompts.

This module contains the system instructions and prompt templates used by the
video summary pipeline.
"""

class SummarizationPrompts:
    """System prompts for the Video Summarization Service."""

    SYSTEM_INSTRUCTIONS = """You are an expert at creating concise, informative summaries of YouTube video transcripts for students.
Create a well-structured summary that captures the key points, main themes, and important insights.
Format your response as a clean, readable summary with bullet points for key concepts.
Also suggest 3-5 relevant tags for categorization.
End your response with a single line of the form:
Tags: tag1, tag2, tag3"""

    USER_TEMPLATE = """Please summarize this YouTube video transcript and suggest relevant tags:

Video Title: {title}

Transcript:
{transcript}

Please provide:
1. A comprehensive summary (2-3 paragraphs)
2. Key points (bullet format)
3. 3-5 relevant tags for categorization"""
