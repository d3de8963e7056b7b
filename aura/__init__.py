"""AURA backend - study assistant API with AI provider fallback"""
